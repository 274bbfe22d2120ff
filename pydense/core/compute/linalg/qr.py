"""
QR decomposition kernel.

Compact (economy) QR through LAPACK geqrf/orgqr via SciPy. Operates on
plain ndarrays; the Matrix-level wrapper lives in pydense.algebra.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
import scipy.linalg
from numpy.typing import NDArray


@dataclass(frozen=True)
class QRResult:
    """
    Result of compact QR decomposition.

    Attributes:
        Q: Orthonormal columns (m x k where k = min(m, n))
        R: Upper triangular factor (k x n)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def numerical_rank_from_r(R: NDArray[np.floating[Any]], shape: tuple[int, int]) -> int:
    """
    Numerical rank from the diagonal of an R factor.

    Diagonal entries above ``max(m, n) * eps * |R[0, 0]|`` count.
    """
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R[0] > 0:
        # Tolerance based on matrix size and machine epsilon
        tol = max(shape) * np.finfo(np.float64).eps * diag_R[0]
        return int(np.sum(diag_R > tol))
    return 0


def qr_cpu(X: NDArray[np.floating[Any]]) -> QRResult:
    """
    Compact QR decomposition using LAPACK (via SciPy).

    Computes X = QR where Q has orthonormal columns and R is upper
    triangular. Q is m x k and R is k x n with k = min(m, n).

    Args:
        X: Matrix to decompose (m x n)

    Returns:
        QRResult with Q, R, and numerical rank
    """
    m, n = X.shape
    k = min(m, n)

    if k == 0:
        return QRResult(
            Q=np.zeros((m, k), order='F'),
            R=np.zeros((k, n), order='F'),
            rank=0,
        )

    Q, R = scipy.linalg.qr(X, mode='economic')

    return QRResult(Q=Q, R=R, rank=numerical_rank_from_r(R, (m, n)))
