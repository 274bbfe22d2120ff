"""
Orthonormal bases by iterated modified Gram-Schmidt.

Public API:
    build_orthonormal_basis(A) -> Matrix
    orthonormalize(A) -> BasisSolution
    project_vector(v, u) -> Vector

build_orthonormal_basis() is the plain engine call. orthonormalize()
accepts array-likes and adds diagnostics (orthogonality error, timing,
conditioning indicator).

Example:
    >>> from pydense.orthogonalization import orthonormalize
    >>> sol = orthonormalize(A)
    >>> print(sol.orthogonality_error)
    >>> print(sol.summary())
"""

from pydense.orthogonalization._common import (
    NUM_PASSES,
    RANK_DEFICIENCY_RTOL,
    BasisParams,
)
from pydense.orthogonalization._mgs import project_vector
from pydense.orthogonalization.solution import BasisSolution
from pydense.orthogonalization.solvers import build_orthonormal_basis, orthonormalize

__all__ = [
    "build_orthonormal_basis",
    "orthonormalize",
    "project_vector",
    "BasisSolution",
    "BasisParams",
    "NUM_PASSES",
    "RANK_DEFICIENCY_RTOL",
]
