"""
Tolerance tiers and precision constants for numerical validation.

Defines precision expectations for the double-precision CPU path:
- CPU FP64: machine-precision agreement with a LAPACK reference
- CPU FP64, ill-conditioned: relaxed for cond > 1e4

Used by the test suite and by the orthogonalization diagnostics to
decide when loss of orthogonality is worth a warning.
"""

from dataclasses import dataclass

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: orthonormality and reconstruction to ~1e-10
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches LAPACK reference',
)

# CPU reference, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if not backend_name.startswith('cpu'):
        raise ValueError(f"No tolerance tier for backend {backend_name!r}")
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
