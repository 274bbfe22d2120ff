"""
PyDense: column-major dense linear algebra kernels for Python.

Storage, elementwise and structural operations for double-precision
matrices and vectors, backend-delegated BLAS/LAPACK products and
factorizations, and an orthonormal basis engine built on them.

Submodules:
    matrix: Matrix/Vector storage, structural and elementwise operations, file I/O
    algebra: Products, factorizations, random initialisation, composite utilities
    orthogonalization: Iterated modified Gram-Schmidt
"""

__version__ = "0.1.0"

from pydense import matrix
from pydense import algebra
from pydense import orthogonalization

from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    RankDeficiencyError,
    AllocationError,
    MatrixIOError,
    MatrixFormatError,
)
from pydense.matrix import Matrix, Vector
from pydense.orthogonalization import build_orthonormal_basis, orthonormalize

__all__ = [
    "__version__",
    "matrix",
    "algebra",
    "orthogonalization",
    "Matrix",
    "Vector",
    "build_orthonormal_basis",
    "orthonormalize",
    "PyDenseError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "RankDeficiencyError",
    "AllocationError",
    "MatrixIOError",
    "MatrixFormatError",
]
