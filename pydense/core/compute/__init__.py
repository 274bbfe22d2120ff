"""
Shared compute infrastructure for PyDense.

This module provides timing utilities, tolerance tiers and the
ndarray-level linear algebra kernels used by the algebra layer.

IMPORTANT: This is NOT where Matrix/Vector operations live. Those go in
pydense.matrix and pydense.algebra. This module contains shared NUMERIC
infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and precision constants
    linalg: Linear algebra kernels (BLAS, QR, SVD, eigh)
"""

from pydense.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
