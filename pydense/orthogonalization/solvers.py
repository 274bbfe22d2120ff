"""
Public entry points for orthonormal basis construction.

build_orthonormal_basis() is the engine call used inside larger
algorithms; orthonormalize() runs the same engine and also reports
timing and orthogonality diagnostics.
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pydense.core.result import Result
from pydense.core.compute.timing import Timer
from pydense.core.compute.tolerances import select_tolerance
from pydense.core.validation import check_finite, check_tolerance
from pydense.matrix.storage import Matrix
from pydense.matrix._common import prepare_matrix_out, require_matrix
from pydense.matrix.elementwise import copy_into, max_abs_element, subtract_inplace
from pydense.matrix.structural import identity_matrix
from pydense.algebra.backends import BackendChoice, get_backend
from pydense.algebra.products import matmul
from pydense.orthogonalization._common import (
    NUM_PASSES,
    RANK_DEFICIENCY_RTOL,
    BasisParams,
)
from pydense.orthogonalization._mgs import modified_gram_schmidt
from pydense.orthogonalization.solution import BasisSolution


def _run_engine(
    A: Matrix,
    out: Matrix | None,
    rtol: float,
) -> tuple[Matrix, list[float]]:
    require_matrix(A, 'A')
    check_finite(A.data, 'A')
    rtol = check_tolerance(rtol, 'rtol')
    Q = prepare_matrix_out(out, A.shape, A)
    copy_into(Q, A)
    residuals = modified_gram_schmidt(Q, rtol)
    return Q, residuals


def build_orthonormal_basis(
    A: Matrix,
    *,
    out: Matrix | None = None,
    rtol: float = RANK_DEFICIENCY_RTOL,
) -> Matrix:
    """
    Orthonormal basis for the column space of A.

    Runs NUM_PASSES sweeps of modified Gram-Schmidt over a copy of A;
    A itself is not modified.

    Args:
        A: m x n matrix with linearly independent columns (so m >= n)
        out: Optional destination, exactly m x n
        rtol: Rank-deficiency threshold relative to each column's norm

    Returns:
        m x n matrix Q with QᵀQ = I and span(Q) = span(A)

    Raises:
        ValidationError: If A contains NaN or Inf, or rtol is negative or
            not a finite number
        RankDeficiencyError: If some column of A is (numerically) a linear
            combination of the columns before it; always the case when m < n
    """
    Q, _ = _run_engine(A, out, rtol)
    return Q


def orthonormalize(
    A: Matrix | ArrayLike,
    *,
    rtol: float = RANK_DEFICIENCY_RTOL,
    backend: BackendChoice = 'auto',
) -> BasisSolution:
    """
    Build an orthonormal basis and report how well it came out.

    Args:
        A: Matrix or any 2-D array-like (m x n)
        rtol: Rank-deficiency threshold relative to each column's norm
        backend: Backend used for the QᵀQ orthogonality check

    Returns:
        BasisSolution with Q, orthogonality_error, min_relative_residual,
        timing and warnings

    Raises:
        ValidationError: If A is not numeric or contains NaN or Inf, or
            rtol is negative or not a finite number
        DimensionError: If A is not 2-D
        RankDeficiencyError: If the columns of A are linearly dependent

    Example:
        >>> sol = orthonormalize([[1, 1], [1, -1], [1, 1], [1, -1]])
        >>> sol.Q.to_array()
        array([[ 0.5,  0.5],
               [ 0.5, -0.5],
               [ 0.5,  0.5],
               [ 0.5, -0.5]])
    """
    # Boundary: accept array-likes, trust Matrix storage after this
    if not isinstance(A, Matrix):
        A = Matrix.from_array(A, 'A')
    be = get_backend(backend)

    timer = Timer()
    timer.start()

    with timer.section('orthogonalize'):
        Q, residuals = _run_engine(A, None, rtol)

    with timer.section('check'):
        n = Q.cols
        QtQ = matmul(Q, Q, transpose_a=True, backend=be)
        orthogonality_error = max_abs_element(subtract_inplace(QtQ, identity_matrix(n)))

    timer.stop()

    warns: list[str] = []
    tol = select_tolerance(be.name)
    if orthogonality_error > tol.rtol:
        msg = (
            f"Basis orthogonality error {orthogonality_error:.2e} exceeds "
            f"{tol.rtol:.0e}; the input is likely ill-conditioned"
        )
        warnings.warn(msg, UserWarning, stacklevel=2)
        warns.append(msg)

    result = Result(
        params=BasisParams(
            Q=Q,
            orthogonality_error=orthogonality_error,
            min_relative_residual=residuals[0],
            passes=NUM_PASSES,
        ),
        info={
            'method': 'modified_gram_schmidt',
            'passes': NUM_PASSES,
            'rtol': rtol,
            'min_relative_residual_per_pass': tuple(residuals),
        },
        timing=timer.result(),
        backend_name=be.name,
        warnings=tuple(warns),
    )
    return BasisSolution(_result=result)
