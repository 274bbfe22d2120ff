"""
Elementwise and reduction operations on matrices and vectors.

In-place updates (scale, subtract, threshold) and reductions (norms,
dot products, column norms). Everything is a single vectorised NumPy
expression over the flat buffer, so there is no cross-element
dependency to respect.

Reductions use NumPy's summation (pairwise) or the BLAS dot product;
norms go through the scaled dnrm2, so they neither overflow nor underflow
for finite input.
Results are accurate to rounding but not bit-reproducible across BLAS
builds or thread counts, since the summation order is theirs.
"""

from __future__ import annotations

import numpy as np

from pydense.core.exceptions import ValidationError
from pydense.core.compute.linalg.blas import nrm2_cpu
from pydense.core.validation import check_index, check_length, check_same_shape
from pydense.matrix.storage import Matrix, Vector
from pydense.matrix._common import (
    prepare_vector_out,
    require_dense,
    require_matrix,
    require_vector,
)

Dense = Matrix | Vector


def scale(x: Dense, scalar: float) -> Dense:
    """Multiply every entry of x by scalar, in place; returns x."""
    require_dense(x, 'x')
    x.data[...] *= scalar
    return x


def copy_into(dest: Dense, src: Dense) -> Dense:
    """
    Elementwise copy src -> dest; returns dest.

    Both must be the same kind (Matrix or Vector) and shape.
    """
    require_dense(dest, 'dest')
    require_dense(src, 'src')
    if type(dest) is not type(src):
        raise ValidationError(
            f"copy_into: cannot copy {type(src).__name__} into {type(dest).__name__}"
        )
    check_same_shape(dest, src, ('dest', 'src'))
    dest.data[:] = src.data
    return dest


def subtract_inplace(a: Dense, b: Dense) -> Dense:
    """a -= b elementwise; returns a."""
    require_dense(a, 'a')
    require_dense(b, 'b')
    check_same_shape(a, b, ('a', 'b'))
    a.data[...] -= b.data
    return a


def hard_threshold(M: Dense, tol: float) -> Dense:
    """Zero every entry with |value| < tol, in place; returns M."""
    require_dense(M, 'M')
    M.data[np.abs(M.data) < tol] = 0.0
    return M


# ═══════════════════════════════════════════════════════════════════════
# Reductions
# ═══════════════════════════════════════════════════════════════════════


def dot(u: Vector, v: Vector) -> float:
    """sum(u_i * v_i); lengths must match."""
    require_vector(u, 'u')
    require_vector(v, 'v')
    check_length(v.length, u.length, 'v')
    return float(np.dot(u.data, v.data))


def norm2(v: Vector) -> float:
    """Euclidean norm sqrt(sum v_i^2), computed without intermediate overflow."""
    require_vector(v, 'v')
    return nrm2_cpu(v.data)


def frobenius_norm(M: Matrix) -> float:
    """sqrt of the sum of squares of all entries."""
    require_matrix(M, 'M')
    return nrm2_cpu(M.data)


def max_abs_element(M: Matrix) -> float:
    """
    Largest absolute value of any entry (0.0 for an empty matrix).

    The value returned is always non-negative: for a matrix whose
    largest-magnitude entry is negative, its absolute value is returned.
    """
    require_matrix(M, 'M')
    if M.size == 0:
        return 0.0
    return float(np.max(np.abs(M.data)))


# ═══════════════════════════════════════════════════════════════════════
# Column norms
# ═══════════════════════════════════════════════════════════════════════


def column_norm_squared(M: Matrix, j: int) -> float:
    """Squared 2-norm of column j (0-based)."""
    require_matrix(M, 'M')
    j = check_index(j, M.cols, 'col')
    col = M.data[j * M.rows:(j + 1) * M.rows]
    return float(np.dot(col, col))


def column_norms_squared(M: Matrix, out: Vector | None = None) -> Vector:
    """Vector of squared 2-norms, one per column of M."""
    require_matrix(M, 'M')
    out = prepare_vector_out(out, M.cols)
    out.data[:] = np.sum(M._fortran_view() ** 2, axis=0)
    return out


def max_column_norm(M: Matrix) -> float:
    """Largest column 2-norm of M (0.0 if M has no columns)."""
    require_matrix(M, 'M')
    if M.cols == 0:
        return 0.0
    return max(nrm2_cpu(M.data[j * M.rows:(j + 1) * M.rows]) for j in range(M.cols))
