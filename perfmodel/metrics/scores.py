"""
Error metrics over parallel actual/predicted sequences.

Pure functions: they take two equal-length numeric sequences and return
plain floats (or an array for residuals). They know nothing about models.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from perfmodel.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_not_empty,
)


def _paired(actual: ArrayLike, predicted: ArrayLike) -> tuple[NDArray, NDArray]:
    a = check_array(actual, 'actual')
    p = check_array(predicted, 'predicted')
    check_1d(a, 'actual')
    check_1d(p, 'predicted')
    check_finite(a, 'actual')
    check_finite(p, 'predicted')
    check_consistent_length(a, p, names=('actual', 'predicted'))
    return a, p


def _paired_non_empty(actual: ArrayLike, predicted: ArrayLike) -> tuple[NDArray, NDArray]:
    a, p = _paired(actual, predicted)
    check_not_empty(a, 'actual')
    return a, p


def residuals(actual: ArrayLike, predicted: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Elementwise actual - predicted.

    Raises:
        DimensionError: If the sequences differ in length
    """
    a, p = _paired(actual, predicted)
    return a - p


def mse(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Mean squared error."""
    a, p = _paired_non_empty(actual, predicted)
    return float(np.mean((a - p) ** 2))


def rmse(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Root mean squared error."""
    return float(np.sqrt(mse(actual, predicted)))


def mae(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Mean absolute error."""
    a, p = _paired_non_empty(actual, predicted)
    return float(np.mean(np.abs(a - p)))


def r_squared(actual: ArrayLike, predicted: ArrayLike) -> float:
    """
    Coefficient of determination, 1 - RSS/TSS.

    TSS is computed around the mean of actual. When TSS is exactly zero
    the result is 1.0.
    """
    a, p = _paired_non_empty(actual, predicted)
    tss = float(np.sum((a - np.mean(a)) ** 2))
    if tss == 0.0:
        return 1.0
    rss = float(np.sum((a - p) ** 2))
    return 1.0 - rss / tss


def mape(actual: ArrayLike, predicted: ArrayLike) -> float:
    """
    Mean absolute percentage error, in percent.

    Entries whose actual value is zero are left out of both the sum and
    the count. If every entry is left out the result is 0.0.
    """
    a, p = _paired_non_empty(actual, predicted)
    valid = a != 0.0
    if not np.any(valid):
        return 0.0
    return float(np.mean(np.abs((a[valid] - p[valid]) / a[valid])) * 100.0)
