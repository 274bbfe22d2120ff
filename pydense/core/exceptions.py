"""
Exception hierarchy for PyDense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all PyDense errors."""
    pass


class ValidationError(PyDenseError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.

    Raised when shapes don't match the operation's preconditions, e.g.
    mismatched inner dimensions in a product or an output buffer that
    is not sized exactly to the result.
    """
    pass


class IndexOutOfRangeError(ValidationError):
    """
    Element, row or column index lies outside the object's shape.

    Attributes:
        index: The offending index (int or (row, col) tuple)
        shape: Shape of the object that was indexed
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyDenseError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires full rank but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(m, n))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class RankDeficiencyError(SingularMatrixError):
    """
    Orthogonalization met a column with zero or negligible residual.

    Raised by the Gram-Schmidt engine when a column is (numerically)
    a linear combination of the columns before it. Recoverable by the
    caller, e.g. by requesting a smaller basis.

    Attributes:
        column: 0-based index of the dependent column
        pass_index: 0-based orthogonalization pass in which it was found
        residual_norm: 2-norm of the column after projection
        reference_norm: 2-norm of the column before projection
        rank: Number of columns accepted before the failure
        expected_rank: Number of columns requested
    """

    def __init__(
        self,
        message: str,
        column: int,
        pass_index: int,
        residual_norm: float,
        reference_norm: float,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(
            message,
            matrix_name=matrix_name,
            rank=rank,
            expected_rank=expected_rank
        )
        self.column = column
        self.pass_index = pass_index
        self.residual_norm = residual_norm
        self.reference_norm = reference_norm


class AllocationError(PyDenseError):
    """
    Storage for a matrix or vector could not be allocated.

    Not recoverable locally; surfaced so the caller can shrink the problem.

    Attributes:
        rows: Requested number of rows (vector length for vectors)
        cols: Requested number of columns (None for vectors)
    """

    def __init__(self, message: str, rows: int, cols: int | None = None):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class MatrixIOError(PyDenseError):
    """
    Reading or writing a matrix file failed.

    Attributes:
        path: Path of the file involved
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class MatrixFormatError(MatrixIOError):
    """
    Matrix file is malformed or truncated.

    Attributes:
        path: Path of the file involved
        expected_bytes: Byte count implied by the header, if known
        actual_bytes: Byte count actually present
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        expected_bytes: int | None = None,
        actual_bytes: int | None = None
    ):
        super().__init__(message, path=path)
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes
