"""
Core infrastructure for PyDense.

This module provides shared abstractions and utilities used by the
matrix, algebra and orthogonalization submodules.

Key components:
    protocols: NumericBackend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pydense.core.protocols import NumericBackend
from pydense.core.result import Result
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

__all__ = [
    # Protocols
    "NumericBackend",
    # Result
    "Result",
    # Exceptions
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
