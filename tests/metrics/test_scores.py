"""
Tests for the pure error metrics.
"""

import numpy as np
import pytest

from perfmodel.core.exceptions import DimensionError, EmptyInputError, ValidationError
from perfmodel.metrics import mae, mape, mse, r_squared, residuals, rmse


ACTUAL = [3.0, -0.5, 2.0, 7.0]
PREDICTED = [2.5, 0.0, 2.0, 8.0]


class TestKnownValues:

    def test_residuals(self):
        np.testing.assert_array_equal(residuals(ACTUAL, PREDICTED), [0.5, -0.5, 0.0, -1.0])

    def test_mse(self):
        assert mse(ACTUAL, PREDICTED) == pytest.approx(0.375)

    def test_rmse_is_root_of_mse(self):
        assert rmse(ACTUAL, PREDICTED) == pytest.approx(np.sqrt(0.375))

    def test_mae(self):
        assert mae(ACTUAL, PREDICTED) == pytest.approx(0.5)

    def test_r_squared(self):
        a = np.array(ACTUAL)
        expected = 1.0 - 1.5 / np.sum((a - a.mean()) ** 2)
        assert r_squared(ACTUAL, PREDICTED) == pytest.approx(expected)

    def test_perfect_prediction(self):
        assert rmse(ACTUAL, ACTUAL) == 0.0
        assert r_squared(ACTUAL, ACTUAL) == 1.0

    def test_accepts_numpy_input(self):
        assert mse(np.array(ACTUAL), np.array(PREDICTED)) == pytest.approx(0.375)


class TestRSquaredEdgeCases:

    def test_zero_variance_is_one(self):
        assert r_squared([5.0, 5.0, 5.0], [1.0, 2.0, 3.0]) == 1.0

    def test_worse_than_mean_is_negative(self):
        assert r_squared([1.0, 2.0, 3.0], [3.0, 2.0, 1.0]) < 0.0


class TestMape:

    def test_percent_units(self):
        assert mape([100.0, 200.0], [110.0, 180.0]) == pytest.approx(10.0)

    def test_zero_actual_is_skipped(self):
        assert mape([0.0, 100.0, 200.0], [5.0, 110.0, 180.0]) == pytest.approx(10.0)

    def test_all_zero_actuals(self):
        assert mape([0.0, 0.0], [1.0, 2.0]) == 0.0


class TestValidation:

    @pytest.mark.parametrize("metric", [mse, rmse, mae, r_squared, mape])
    def test_length_mismatch(self, metric):
        with pytest.raises(DimensionError):
            metric([1.0, 2.0], [1.0])

    @pytest.mark.parametrize("metric", [mse, rmse, mae, r_squared, mape])
    def test_empty(self, metric):
        with pytest.raises(EmptyInputError):
            metric([], [])

    def test_residuals_of_empty_is_empty(self):
        assert residuals([], []).shape == (0,)

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            mse(["a", "b"], [1.0, 2.0])

    @pytest.mark.parametrize("metric", [mse, mae, r_squared, mape, residuals])
    def test_non_finite_rejected(self, metric):
        with pytest.raises(ValidationError, match="non-finite"):
            metric([1.0, np.nan], [1.0, 2.0])

    def test_two_dimensional_rejected(self):
        with pytest.raises(DimensionError):
            mse([[1.0, 2.0]], [[1.0, 2.0]])
