"""
Core infrastructure for perfmodel.

This module provides shared abstractions used by all domain-specific
submodules (linalg, regression, metrics, datasets).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Pivot tolerance and comparison tiers
    timing: Section timer for solve stages
"""

from perfmodel.core.result import Result
from perfmodel.core.exceptions import (
    PerfModelError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidFeatureCountError,
    EmptyInputError,
    NumericalError,
    SingularMatrixError,
    IndexOutOfRangeError,
    NotTrainedError,
)
from perfmodel.core.tolerances import PIVOT_TOLERANCE

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PerfModelError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidFeatureCountError",
    "EmptyInputError",
    "NumericalError",
    "SingularMatrixError",
    "IndexOutOfRangeError",
    "NotTrainedError",
    # Tolerances
    "PIVOT_TOLERANCE",
]
