"""
Singular value decomposition kernel.

Economy SVD through LAPACK dgesvd via SciPy.
"""

from typing import Any
import numpy as np
import scipy.linalg
from numpy.typing import NDArray


def svd_cpu(
    X: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Economy SVD X = U diag(s) Vt.

    Uses the gesvd driver (QR iteration) rather than the divide-and-conquer
    default.

    Args:
        X: Matrix to decompose (m x n)

    Returns:
        (U, s, Vt) with U m x k, s length k (non-negative, descending),
        Vt k x n, where k = min(m, n)
    """
    m, n = X.shape
    k = min(m, n)

    if k == 0:
        return np.zeros((m, 0)), np.zeros(0), np.zeros((0, n))

    return scipy.linalg.svd(X, full_matrices=False, lapack_driver='gesvd')
