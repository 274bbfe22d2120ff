"""
Core protocols for PyDense.

These define the structural interface of the external numeric backend.
We use Protocol (structural typing) rather than ABC (nominal typing) so
any object with the right methods can stand in for the bundled CPU
backend, e.g. a wrapper around a vendor BLAS/LAPACK build.

Design Principles:
    - Minimal contracts: only what the algebra layer actually calls
    - ndarray in, ndarray out: backends never see Matrix/Vector objects
    - Column-major: 2-D arguments are Fortran-ordered views of the
      owning buffer, so a BLAS/LAPACK binding can use them without copying
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class NumericBackend(Protocol):
    """
    Protocol for the dense numeric backend.

    Backends are stateless. All outputs are freshly allocated arrays; the
    algebra layer copies them into the owning Matrix/Vector buffers.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{library}'
        Examples: 'cpu_lapack'
        """
        ...

    def gemm(
        self,
        a: NDArray[np.float64],
        b: NDArray[np.float64],
        trans_a: bool = False,
        trans_b: bool = False,
    ) -> NDArray[np.float64]:
        """
        General matrix-matrix product C = op(a) @ op(b).

        Unit scale; C is freshly allocated, never accumulated into.
        """
        ...

    def gemv(
        self,
        a: NDArray[np.float64],
        x: NDArray[np.float64],
        trans: bool = False,
    ) -> NDArray[np.float64]:
        """Matrix-vector product y = op(a) @ x."""
        ...

    def qr(self, a: NDArray[np.float64]) -> Any:
        """
        Compact QR factorization.

        Returns:
            Object with Q (m x k), R (k x n) and rank, k = min(m, n)
        """
        ...

    def svd(
        self, a: NDArray[np.float64]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
        """
        Economy SVD a = U diag(s) Vt.

        Returns:
            (U, s, Vt) with s non-negative and descending
        """
        ...

    def eigh(
        self, a: NDArray[np.float64]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Symmetric eigendecomposition using the upper triangle of a.

        Returns:
            (eigenvalues ascending, eigenvectors as columns)
        """
        ...

    def gaussian(
        self,
        shape: tuple[int, ...],
        rng: np.random.Generator,
    ) -> NDArray[np.float64]:
        """Standard normal variates of the given shape."""
        ...
