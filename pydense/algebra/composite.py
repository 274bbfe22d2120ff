"""
Composite utilities for validating factorizations.

Built from the storage, elementwise and product layers; used by callers
to check how well a factorization reproduces its input.
"""

from __future__ import annotations

from pydense.core.exceptions import DimensionError, NumericalError
from pydense.core.validation import check_same_shape
from pydense.matrix.storage import Matrix
from pydense.matrix._common import prepare_matrix_out, require_matrix
from pydense.matrix.elementwise import frobenius_norm, subtract_inplace
from pydense.algebra.backends import BackendChoice
from pydense.algebra.products import matmul


def percent_error(A: Matrix, B: Matrix) -> float:
    """
    Relative difference of B from A in percent.

    Computes 100 * ||A - B||_F / ||A||_F.

    Raises:
        DimensionError: If A and B differ in shape
        NumericalError: If A is the zero matrix
    """
    require_matrix(A, 'A')
    require_matrix(B, 'B')
    check_same_shape(A, B, ('A', 'B'))

    norm_a = frobenius_norm(A)
    if norm_a == 0.0:
        raise NumericalError("percent_error: reference matrix A has zero Frobenius norm")

    diff = subtract_inplace(A.copy(), B)
    return 100.0 * frobenius_norm(diff) / norm_a


def form_svd_product(
    U: Matrix,
    S: Matrix,
    V: Matrix,
    *,
    out: Matrix | None = None,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    P = U @ S @ Vᵀ from SVD-shaped factors.

    Note V is passed un-transposed (n x k); pass ``transpose(Vt)`` when
    holding Vt, or use ``SVDFactors.reconstruct()``.

    Args:
        U: m x k
        S: k x k
        V: n x k
        out: Optional destination, exactly m x n
        backend: Numeric backend choice
    """
    require_matrix(U, 'U')
    require_matrix(S, 'S')
    require_matrix(V, 'V')
    if U.cols != S.rows or S.cols != V.cols:
        raise DimensionError(
            f"form_svd_product: incompatible factors U {U.shape}, S {S.shape}, V {V.shape}"
        )

    out = prepare_matrix_out(out, (U.rows, V.rows), U, S, V)
    SVt = matmul(S, V, transpose_b=True, backend=backend)
    return matmul(U, SVt, out=out, backend=backend)
