"""
Binary matrix file format.

Layout (native byte order, no magic number, no version, no padding):

    int32   rows
    int32   cols
    float64 values[rows * cols]     row-major: all of row 0, then row 1, ...

Storage in memory is column-major, so loading and saving translate
between the two orders. A file whose size does not match its header
exactly (truncated payload or trailing bytes) is rejected.
"""

from __future__ import annotations

import os
from pathlib import Path

import numpy as np

from pydense.core.exceptions import MatrixFormatError, MatrixIOError, ValidationError
from pydense.matrix.storage import Matrix
from pydense.matrix._common import require_matrix

_HEADER_DTYPE = np.dtype('=i4')
_VALUE_DTYPE = np.dtype('=f8')
_HEADER_BYTES = 2 * _HEADER_DTYPE.itemsize
_INT32_MAX = np.iinfo(np.int32).max


def load_matrix_binary(path: str | os.PathLike) -> Matrix:
    """
    Load a matrix from the binary format.

    Args:
        path: File to read

    Returns:
        Matrix with the file's contents

    Raises:
        MatrixIOError: If the file cannot be read
        MatrixFormatError: If the header is short or invalid, or the
            payload size does not match the header
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise MatrixIOError(f"Cannot read matrix file {path}: {e}", path=str(path)) from e

    if len(raw) < _HEADER_BYTES:
        raise MatrixFormatError(
            f"{path}: file too short for header ({len(raw)} of {_HEADER_BYTES} bytes)",
            path=str(path),
            expected_bytes=_HEADER_BYTES,
            actual_bytes=len(raw),
        )

    rows, cols = (int(x) for x in np.frombuffer(raw, dtype=_HEADER_DTYPE, count=2))
    if rows < 0 or cols < 0:
        raise MatrixFormatError(
            f"{path}: negative dimensions in header ({rows} x {cols})",
            path=str(path),
        )

    expected = _HEADER_BYTES + rows * cols * _VALUE_DTYPE.itemsize
    if len(raw) != expected:
        kind = "truncated" if len(raw) < expected else "has trailing bytes"
        raise MatrixFormatError(
            f"{path}: file {kind}: header says {rows} x {cols} "
            f"({expected} bytes), file has {len(raw)} bytes",
            path=str(path),
            expected_bytes=expected,
            actual_bytes=len(raw),
        )

    M = Matrix(rows, cols)
    if M.size:
        values = np.frombuffer(raw, dtype=_VALUE_DTYPE, count=M.size, offset=_HEADER_BYTES)
        M._fortran_view()[...] = values.reshape((rows, cols))
    return M


def save_matrix_binary(M: Matrix, path: str | os.PathLike) -> None:
    """
    Write a matrix in the binary format (values in row-major order).

    Raises:
        ValidationError: If a dimension does not fit in an int32
        MatrixIOError: If the file cannot be written
    """
    require_matrix(M, 'M')
    if M.rows > _INT32_MAX or M.cols > _INT32_MAX:
        raise ValidationError(
            f"M: dimensions {M.rows} x {M.cols} exceed the int32 header range"
        )

    path = Path(path)
    header = np.array([M.rows, M.cols], dtype=_HEADER_DTYPE)
    # C-order copy of the (rows, cols) view is exactly the row-major payload
    body = np.ascontiguousarray(M._fortran_view(), dtype=_VALUE_DTYPE)
    try:
        with path.open('wb') as fh:
            fh.write(header.tobytes())
            fh.write(body.tobytes())
    except OSError as e:
        raise MatrixIOError(f"Cannot write matrix file {path}: {e}", path=str(path)) from e
