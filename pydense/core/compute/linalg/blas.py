"""
BLAS level-2/3 kernels.

Thin wrappers over SciPy's double-precision BLAS bindings. Inputs are
expected to be Fortran-ordered (column-major) so no copy is made on the
way into dgemm/dgemv; other layouts still work but are copied.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import blas


def gemm_cpu(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    trans_a: bool = False,
    trans_b: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    C = op(a) @ op(b) via dgemm with alpha = 1, beta = 0.

    Args:
        a: Left operand
        b: Right operand
        trans_a: Use a.T in place of a
        trans_b: Use b.T in place of b

    Returns:
        Freshly allocated Fortran-ordered product
    """
    m = a.shape[1] if trans_a else a.shape[0]
    k = a.shape[0] if trans_a else a.shape[1]
    n = b.shape[0] if trans_b else b.shape[1]

    # dgemm rejects zero-sized operands; the product is all zeros anyway
    if m == 0 or n == 0 or k == 0:
        return np.zeros((m, n), order='F')

    return blas.dgemm(
        1.0, a, b,
        trans_a=int(trans_a),
        trans_b=int(trans_b),
    )


def gemv_cpu(
    a: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
    trans: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    y = op(a) @ x via dgemv with alpha = 1, beta = 0.

    Args:
        a: Matrix operand
        x: Vector operand
        trans: Use a.T in place of a

    Returns:
        Freshly allocated result vector
    """
    m, n = a.shape
    out_len = n if trans else m
    in_len = m if trans else n

    if out_len == 0 or in_len == 0:
        return np.zeros(out_len)

    return blas.dgemv(1.0, a, x, trans=int(trans))


def nrm2_cpu(x: NDArray[np.floating[Any]]) -> float:
    """
    Euclidean norm via dnrm2.

    dnrm2 rescales while it accumulates, so entries near the overflow or
    underflow threshold give the correctly scaled norm instead of inf or 0.

    Args:
        x: 1-D operand

    Returns:
        ||x||_2 as a Python float (0.0 for an empty vector)
    """
    if x.shape[0] == 0:
        return 0.0
    return float(blas.dnrm2(x))
