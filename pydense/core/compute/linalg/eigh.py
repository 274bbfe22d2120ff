"""
Symmetric eigendecomposition kernel.

LAPACK dsyev via SciPy. Only the upper triangle of the input is read,
so accumulated rounding in the strict lower triangle is harmless.
"""

from typing import Any
import numpy as np
import scipy.linalg
from numpy.typing import NDArray


def eigh_cpu(
    S: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Eigenvalues and eigenvectors of a symmetric matrix.

    Args:
        S: Square matrix (n x n); upper triangle used

    Returns:
        (w, V) with w ascending and V's columns the matching
        orthonormal eigenvectors
    """
    n = S.shape[0]
    if n == 0:
        return np.zeros(0), np.zeros((0, 0))

    return scipy.linalg.eigh(S, lower=False, driver='ev')
