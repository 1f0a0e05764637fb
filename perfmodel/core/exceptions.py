"""
Exception hierarchy for perfmodel.

All exceptions inherit from PerfModelError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PerfModelError(Exception):
    """Base exception for all perfmodel errors."""
    pass


class ValidationError(PerfModelError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or sequence dimensions are incompatible.

    Raised when shapes don't match what an operation requires, e.g. adding
    a 2x3 matrix to a 3x2 matrix or multiplying when lhs.cols != rhs.rows.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """Inverse or determinant requested for a non-square matrix."""
    pass


class InvalidFeatureCountError(DimensionError):
    """A feature sequence does not have the required number of entries."""
    pass


class EmptyInputError(ValidationError):
    """
    An operation received zero examples or an empty sequence.

    Raised when training on an empty dataset or computing a metric over
    empty inputs.
    """
    pass


class NumericalError(PerfModelError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by Gauss-Jordan inversion when the best available pivot in a
    column is below the pivot tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_column: Column in which elimination broke down
        pivot_value: Magnitude of the best pivot candidate found
        tolerance: Pivot tolerance that was not met
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_column: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_column = pivot_column
        self.pivot_value = pivot_value
        self.tolerance = tolerance


class IndexOutOfRangeError(PerfModelError, IndexError):
    """
    Element or row index outside the matrix bounds.

    Also an IndexError so generic sequence-handling code keeps working.

    Attributes:
        index: The offending (row, col) or row index
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NotTrainedError(PerfModelError):
    """Prediction or scoring requested before the model was trained."""
    pass
