"""
Matrix factorizations: compact QR, economy SVD, symmetric eigendecomposition.

The numerical method belongs to the backend; these wrappers own the
shape and sign contracts and copy the factors into Matrix/Vector
storage.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydense.core.exceptions import DimensionError
from pydense.core.validation import check_finite
from pydense.matrix.storage import Matrix, Vector
from pydense.matrix._common import require_matrix
from pydense.matrix.structural import diagonal_matrix
from pydense.algebra.backends import BackendChoice, get_backend
from pydense.algebra.products import matmul


@dataclass(frozen=True)
class QRFactors:
    """
    Compact QR factors of an m x n matrix with m >= n.

    Attributes:
        Q: m x n, orthonormal columns
        R: n x n, upper triangular
        rank: Numerical rank from the diagonal of R
    """
    Q: Matrix
    R: Matrix
    rank: int


@dataclass(frozen=True)
class SVDFactors:
    """
    Economy SVD M = U S Vt with k = min(m, n).

    Attributes:
        U: m x k, orthonormal columns
        S: k x k diagonal matrix of singular values
        Vt: k x n, orthonormal rows
        singular_values: length k, non-negative, descending
    """
    U: Matrix
    S: Matrix
    Vt: Matrix
    singular_values: Vector

    def reconstruct(self, backend: BackendChoice = 'auto') -> Matrix:
        """U @ S @ Vt."""
        return matmul(self.U, matmul(self.S, self.Vt, backend=backend), backend=backend)


@dataclass(frozen=True)
class EigenFactors:
    """
    Symmetric eigendecomposition S = V diag(w) Vᵀ.

    Attributes:
        eigenvalues: length n, ascending
        eigenvectors: n x n, column i pairs with eigenvalues[i]
    """
    eigenvalues: Vector
    eigenvectors: Matrix


def _check_input(M: Matrix, name: str) -> None:
    require_matrix(M, name)
    check_finite(M.data, name)


def compact_qr(M: Matrix, *, backend: BackendChoice = 'auto') -> QRFactors:
    """
    Compact QR factorization M = Q R.

    Only tall or square input is accepted. For a wide M an m x n Q with
    orthonormal columns does not exist, so it is rejected up front rather
    than failing inside the Q-forming LAPACK step.

    Args:
        M: m x n matrix with m >= n

    Returns:
        QRFactors with Q m x n and R n x n upper triangular

    Raises:
        DimensionError: If m < n
        ValidationError: If M contains NaN or Inf
    """
    _check_input(M, 'M')
    if M.rows < M.cols:
        raise DimensionError(
            f"compact_qr: requires rows >= cols, got {M.rows} x {M.cols}"
        )
    result = get_backend(backend).qr(M._fortran_view())
    return QRFactors(
        Q=Matrix.from_array(result.Q, 'Q'),
        R=Matrix.from_array(result.R, 'R'),
        rank=result.rank,
    )


def qr_q(M: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
    """The m x n Q factor of M's compact QR factorization."""
    return compact_qr(M, backend=backend).Q


def svd(M: Matrix, *, backend: BackendChoice = 'auto') -> SVDFactors:
    """
    Economy singular value decomposition M = U S Vt.

    Args:
        M: m x n matrix

    Returns:
        SVDFactors; singular values non-negative and in descending order
    """
    _check_input(M, 'M')
    U, s, Vt = get_backend(backend).svd(M._fortran_view())
    singular_values = Vector.from_array(s, 'singular_values')
    return SVDFactors(
        U=Matrix.from_array(U, 'U'),
        S=diagonal_matrix(singular_values),
        Vt=Matrix.from_array(Vt, 'Vt'),
        singular_values=singular_values,
    )


def symmetric_eigendecomposition(
    S: Matrix,
    *,
    overwrite: bool = False,
    backend: BackendChoice = 'auto',
) -> EigenFactors:
    """
    Eigenvalues and eigenvectors of a symmetric matrix.

    Only the upper triangle of S is read.

    Args:
        S: n x n symmetric matrix
        overwrite: Also write the eigenvectors into S's storage
        backend: Numeric backend choice

    Returns:
        EigenFactors with ascending eigenvalues

    Raises:
        DimensionError: If S is not square
    """
    _check_input(S, 'S')
    if S.rows != S.cols:
        raise DimensionError(
            f"symmetric_eigendecomposition: S must be square, got {S.rows} x {S.cols}"
        )
    w, V = get_backend(backend).eigh(S._fortran_view())
    eigenvectors = Matrix.from_array(V, 'eigenvectors')
    if overwrite:
        S.data[:] = eigenvectors.data
    return EigenFactors(
        eigenvalues=Vector.from_array(w, 'eigenvalues'),
        eigenvectors=eigenvectors,
    )
