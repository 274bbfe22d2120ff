"""
Constants and parameter payload for orthonormal basis construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydense.matrix.storage import Matrix


# Every column is orthogonalized against its predecessors this many times.
# One pass loses orthogonality as cond(A) grows; a second restores it to
# working precision.
NUM_PASSES = 2

# A column whose residual falls to this fraction of its norm at the start
# of the pass is treated as linearly dependent.
RANK_DEFICIENCY_RTOL = 1e-12


@dataclass(frozen=True)
class BasisParams:
    """Orthonormal basis payload carried inside a Result envelope."""

    Q: Matrix                        # (m, n) orthonormal columns
    orthogonality_error: float       # max |QᵀQ - I|
    min_relative_residual: float     # smallest ||v|| / ref in the first pass
    passes: int                      # orthogonalization passes performed
