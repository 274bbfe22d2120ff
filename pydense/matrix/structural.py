"""
Structural matrix operations.

Transpose, sub-block extraction, concatenation, triangle handling and
diagonal construction. Each operation is a pure index-translated copy
into a destination sized exactly for the result (see ``_common``).

Row/column subset extraction takes 1-BASED index lists. The lists are
validated and converted to 0-based once, here at the boundary;
everything below works 0-based.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pydense.core.exceptions import DimensionError, IndexOutOfRangeError, ValidationError
from pydense.core.validation import check_array, check_1d, check_block_size, check_dimension
from pydense.matrix.storage import Matrix, Vector
from pydense.matrix._common import prepare_matrix_out, require_matrix, require_vector


def transpose(M: Matrix, out: Matrix | None = None) -> Matrix:
    """Mt[j, i] = M[i, j]; result is cols(M) x rows(M)."""
    require_matrix(M, 'M')
    out = prepare_matrix_out(out, (M.cols, M.rows), M)
    out._fortran_view()[...] = M._fortran_view().T
    return out


# ═══════════════════════════════════════════════════════════════════════
# Sub-block copies
# ═══════════════════════════════════════════════════════════════════════


def copy_first_rows(M: Matrix, k: int, out: Matrix | None = None) -> Matrix:
    """M[:k, :] as a k x cols(M) matrix."""
    require_matrix(M, 'M')
    k = check_block_size(k, M.rows, 'k')
    out = prepare_matrix_out(out, (k, M.cols), M)
    out._fortran_view()[...] = M._fortran_view()[:k, :]
    return out


def copy_first_columns(M: Matrix, k: int, out: Matrix | None = None) -> Matrix:
    """M[:, :k] as a rows(M) x k matrix."""
    require_matrix(M, 'M')
    k = check_block_size(k, M.cols, 'k')
    out = prepare_matrix_out(out, (M.rows, k), M)
    # Leading columns are a contiguous prefix of the buffer
    out.data[:] = M.data[:M.rows * k]
    return out


def copy_leading_block(M: Matrix, k: int, out: Matrix | None = None) -> Matrix:
    """M[:k, :k] as a k x k matrix."""
    require_matrix(M, 'M')
    k = check_block_size(k, min(M.rows, M.cols), 'k')
    out = prepare_matrix_out(out, (k, k), M)
    out._fortran_view()[...] = M._fortran_view()[:k, :k]
    return out


def copy_last_columns(M: Matrix, k: int, out: Matrix | None = None) -> Matrix:
    """M[:, k:], the columns from 0-based index k onwards."""
    require_matrix(M, 'M')
    k = check_block_size(k, M.cols, 'k')
    out = prepare_matrix_out(out, (M.rows, M.cols - k), M)
    out.data[:] = M.data[M.rows * k:]
    return out


def copy_last_rows(M: Matrix, k: int, out: Matrix | None = None) -> Matrix:
    """M[k:, :], the rows from 0-based index k onwards."""
    require_matrix(M, 'M')
    k = check_block_size(k, M.rows, 'k')
    out = prepare_matrix_out(out, (M.rows - k, M.cols), M)
    out._fortran_view()[...] = M._fortran_view()[k:, :]
    return out


def copy_lower_right(M: Matrix, k: int, out: Matrix | None = None) -> Matrix:
    """M[k:, k:], the block below and right of the leading k x k block."""
    require_matrix(M, 'M')
    k = check_block_size(k, min(M.rows, M.cols), 'k')
    out = prepare_matrix_out(out, (M.rows - k, M.cols - k), M)
    out._fortran_view()[...] = M._fortran_view()[k:, k:]
    return out


def _zero_based(indices: Vector | Sequence[Any], bound: int, name: str) -> NDArray[np.intp]:
    """Validate a 1-based index list and convert it to 0-based."""
    values = indices.data if isinstance(indices, Vector) else check_array(indices, name)
    check_1d(values, name)
    if not np.all(np.isfinite(values)) or not np.all(values == np.round(values)):
        raise ValidationError(f"{name}: indices must be integral values")
    one_based = values.astype(np.intp)
    bad = (one_based < 1) | (one_based > bound)
    if np.any(bad):
        first = int(one_based[np.argmax(bad)])
        raise IndexOutOfRangeError(
            f"{name}: 1-based index {first} out of range 1..{bound}",
            index=first,
            shape=(bound,),
        )
    return one_based - 1


def copy_columns(
    M: Matrix,
    indices: Vector | Sequence[Any],
    out: Matrix | None = None,
) -> Matrix:
    """
    Columns of M selected by a 1-based index list.

    Column c of the result is column ``indices[c] - 1`` of M. Repeats
    are allowed.
    """
    require_matrix(M, 'M')
    cols = _zero_based(indices, M.cols, 'indices')
    out = prepare_matrix_out(out, (M.rows, cols.shape[0]), M)
    out._fortran_view()[...] = M._fortran_view()[:, cols]
    return out


def copy_rows(
    M: Matrix,
    indices: Vector | Sequence[Any],
    out: Matrix | None = None,
) -> Matrix:
    """
    Rows of M selected by a 1-based index list.

    Row r of the result is row ``indices[r] - 1`` of M.
    """
    require_matrix(M, 'M')
    rows = _zero_based(indices, M.rows, 'indices')
    out = prepare_matrix_out(out, (rows.shape[0], M.cols), M)
    out._fortran_view()[...] = M._fortran_view()[rows, :]
    return out


# ═══════════════════════════════════════════════════════════════════════
# Concatenation
# ═══════════════════════════════════════════════════════════════════════


def concat_horizontal(A: Matrix, B: Matrix, out: Matrix | None = None) -> Matrix:
    """C = [A | B]; requires rows(A) == rows(B)."""
    require_matrix(A, 'A')
    require_matrix(B, 'B')
    if A.rows != B.rows:
        raise DimensionError(
            f"concat_horizontal: A has {A.rows} rows but B has {B.rows} rows"
        )
    out = prepare_matrix_out(out, (A.rows, A.cols + B.cols), A, B)
    # In column-major order [A | B] is A's buffer followed by B's
    out.data[:A.size] = A.data
    out.data[A.size:] = B.data
    return out


def concat_vertical(A: Matrix, B: Matrix, out: Matrix | None = None) -> Matrix:
    """C = [A; B]; requires cols(A) == cols(B)."""
    require_matrix(A, 'A')
    require_matrix(B, 'B')
    if A.cols != B.cols:
        raise DimensionError(
            f"concat_vertical: A has {A.cols} columns but B has {B.cols} columns"
        )
    out = prepare_matrix_out(out, (A.rows + B.rows, A.cols), A, B)
    view = out._fortran_view()
    view[:A.rows, :] = A._fortran_view()
    view[A.rows:, :] = B._fortran_view()
    return out


# ═══════════════════════════════════════════════════════════════════════
# Triangles and diagonals
# ═══════════════════════════════════════════════════════════════════════


def copy_upper_triangle(M: Matrix, out: Matrix | None = None) -> Matrix:
    """
    Copy the entries with j >= i from M.

    The strict lower triangle of ``out`` is left as it was (all zeros
    for a freshly allocated result). Used to keep a matrix exactly
    symmetric in the parts a symmetric kernel reads.
    """
    require_matrix(M, 'M')
    out = prepare_matrix_out(out, M.shape, M)
    mask = np.triu(np.ones(M.shape, dtype=bool))
    dest = out._fortran_view()
    dest[mask] = M._fortran_view()[mask]
    return out


def keep_only_upper_triangular(M: Matrix) -> Matrix:
    """Zero the strict lower triangle of M in place; returns M."""
    require_matrix(M, 'M')
    view = M._fortran_view()
    view[np.tril(np.ones(M.shape, dtype=bool), k=-1)] = 0.0
    return M


def diagonal_matrix(v: Vector, out: Matrix | None = None) -> Matrix:
    """Square matrix with v on the diagonal and zeros elsewhere."""
    require_vector(v, 'v')
    n = v.length
    out = prepare_matrix_out(out, (n, n))
    out.data[:] = 0.0
    # Diagonal entries sit n + 1 apart in column-major order
    out.data[::n + 1] = v.data
    return out


def identity_matrix(n: int, out: Matrix | None = None) -> Matrix:
    """n x n identity."""
    n = check_dimension(n, "n")
    out = prepare_matrix_out(out, (n, n))
    out.data[:] = 0.0
    out.data[::n + 1] = 1.0
    return out


def invert_diagonal(D: Matrix, out: Matrix | None = None) -> Matrix:
    """
    diag(1 / D[i, i]) for a square D.

    Off-diagonal entries of D are ignored. A zero diagonal entry gives
    ``inf`` in the result; it is not treated as an error.
    """
    require_matrix(D, 'D')
    if D.rows != D.cols:
        raise DimensionError(f"invert_diagonal: D must be square, got {D.rows} x {D.cols}")
    n = D.rows
    out = prepare_matrix_out(out, (n, n), D)
    out.data[:] = 0.0
    with np.errstate(divide='ignore'):
        out.data[::n + 1] = 1.0 / D.data[::n + 1]
    return out
