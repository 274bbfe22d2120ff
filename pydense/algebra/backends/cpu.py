"""
CPU reference backend for dense linear algebra.

Uses BLAS and LAPACK through SciPy (dgemm, dgemv, geqrf/orgqr, gesvd,
syev) and NumPy's Generator for Gaussian variates. This is the
reference implementation the rest of the library is tested against.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydense.core.compute.linalg import (
    QRResult,
    eigh_cpu,
    gemm_cpu,
    gemv_cpu,
    qr_cpu,
    svd_cpu,
)


class CPUBackend:
    """
    CPU backend using SciPy's BLAS/LAPACK bindings.

    Implements the NumericBackend protocol.
    """

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def gemm(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
        trans_a: bool = False,
        trans_b: bool = False,
    ) -> NDArray[np.floating[Any]]:
        return gemm_cpu(a, b, trans_a=trans_a, trans_b=trans_b)

    def gemv(
        self,
        a: NDArray[np.floating[Any]],
        x: NDArray[np.floating[Any]],
        trans: bool = False,
    ) -> NDArray[np.floating[Any]]:
        return gemv_cpu(a, x, trans=trans)

    def qr(self, a: NDArray[np.floating[Any]]) -> QRResult:
        return qr_cpu(a)

    def svd(self, a: NDArray[np.floating[Any]]):
        return svd_cpu(a)

    def eigh(self, a: NDArray[np.floating[Any]]):
        return eigh_cpu(a)

    def gaussian(
        self,
        shape: tuple[int, ...],
        rng: np.random.Generator,
    ) -> NDArray[np.floating[Any]]:
        return rng.standard_normal(shape)
