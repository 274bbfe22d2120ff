"""
Linear algebra kernels for PyDense.

This module provides the CPU implementations of the BLAS/LAPACK
operations the algebra layer delegates to.

All functions follow these conventions:
    - ndarray in, ndarray out (no Matrix/Vector objects at this level)
    - NumPy/SciPy do the work (BLAS/LAPACK under the hood)
    - Zero-sized inputs return correctly shaped empty results
    - Errors from the numeric library propagate unchanged

Submodules:
    blas: dgemm / dgemv with transpose flags, scaled dnrm2
    qr: Compact QR decomposition
    svd: Economy singular value decomposition
    eigh: Symmetric eigendecomposition
"""

from pydense.core.compute.linalg.blas import gemm_cpu, gemv_cpu, nrm2_cpu
from pydense.core.compute.linalg.qr import QRResult, qr_cpu, numerical_rank_from_r
from pydense.core.compute.linalg.svd import svd_cpu
from pydense.core.compute.linalg.eigh import eigh_cpu

__all__ = [
    # BLAS
    "gemm_cpu",
    "gemv_cpu",
    "nrm2_cpu",
    # QR decomposition
    "QRResult",
    "qr_cpu",
    "numerical_rank_from_r",
    # SVD
    "svd_cpu",
    # Symmetric eigendecomposition
    "eigh_cpu",
]
