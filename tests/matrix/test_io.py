"""
Tests for the binary matrix file format.

Validates:
    - Save/load preserves shape and values
    - On-disk payload is row-major after an int32 header
    - Short headers, truncated payloads and trailing bytes are rejected
    - Unreadable paths surface as MatrixIOError
"""

import numpy as np
import pytest

from pydense.core.exceptions import MatrixFormatError, MatrixIOError
from pydense.matrix import Matrix, load_matrix_binary, save_matrix_binary


def _write_raw(path, rows, cols, values):
    header = np.array([rows, cols], dtype='=i4').tobytes()
    path.write_bytes(header + np.asarray(values, dtype='=f8').tobytes())


class TestRoundTrip:

    def test_save_then_load(self, tmp_path, rng):
        arr = rng.standard_normal((4, 3))
        path = tmp_path / "m.bin"
        save_matrix_binary(Matrix.from_array(arr), path)
        loaded = load_matrix_binary(path)
        assert loaded.shape == (4, 3)
        np.testing.assert_array_equal(loaded.to_array(), arr)

    def test_accepts_str_path(self, tmp_path):
        path = str(tmp_path / "m.bin")
        save_matrix_binary(Matrix.from_array([[1.0, 2.0]]), path)
        assert load_matrix_binary(path).get(0, 1) == 2.0

    def test_empty_matrix(self, tmp_path):
        path = tmp_path / "empty.bin"
        save_matrix_binary(Matrix(0, 5), path)
        assert path.stat().st_size == 8
        assert load_matrix_binary(path).shape == (0, 5)


class TestLayout:

    def test_payload_is_row_major(self, tmp_path):
        path = tmp_path / "m.bin"
        save_matrix_binary(Matrix.from_array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]), path)
        raw = path.read_bytes()
        np.testing.assert_array_equal(np.frombuffer(raw[:8], dtype='=i4'), [3, 2])
        np.testing.assert_array_equal(
            np.frombuffer(raw[8:], dtype='=f8'), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        )

    def test_load_hand_written_file(self, tmp_path):
        path = tmp_path / "m.bin"
        _write_raw(path, 2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        M = load_matrix_binary(path)
        np.testing.assert_array_equal(M.to_array(), [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        # In memory the first column is contiguous
        np.testing.assert_array_equal(M.data[:2], [1.0, 4.0])


class TestMalformed:

    def test_missing_file(self, tmp_path):
        path = tmp_path / "absent.bin"
        with pytest.raises(MatrixIOError) as exc_info:
            load_matrix_binary(path)
        assert exc_info.value.path == str(path)
        assert not isinstance(exc_info.value, MatrixFormatError)

    def test_short_header(self, tmp_path):
        path = tmp_path / "short.bin"
        path.write_bytes(b"\x01\x00\x00")
        with pytest.raises(MatrixFormatError, match="too short"):
            load_matrix_binary(path)

    def test_truncated_payload(self, tmp_path):
        path = tmp_path / "trunc.bin"
        _write_raw(path, 2, 2, [1.0, 2.0, 3.0])
        with pytest.raises(MatrixFormatError, match="truncated") as exc_info:
            load_matrix_binary(path)
        assert exc_info.value.expected_bytes == 8 + 4 * 8
        assert exc_info.value.actual_bytes == 8 + 3 * 8

    def test_trailing_bytes(self, tmp_path):
        path = tmp_path / "long.bin"
        _write_raw(path, 1, 2, [1.0, 2.0, 3.0])
        with pytest.raises(MatrixFormatError, match="trailing"):
            load_matrix_binary(path)

    def test_negative_dimension(self, tmp_path):
        path = tmp_path / "neg.bin"
        _write_raw(path, -1, 2, [])
        with pytest.raises(MatrixFormatError, match="negative"):
            load_matrix_binary(path)

    def test_unwritable_path(self, tmp_path):
        path = tmp_path / "no_such_dir" / "m.bin"
        with pytest.raises(MatrixIOError):
            save_matrix_binary(Matrix(1, 1), path)
