"""
Stateful linear regression model.

LinearRegression holds at most one trained solution. It starts untrained;
a successful train()/train_ridge() replaces the current solution, while a
failed one raises and leaves the previous state untouched.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import NDArray

from perfmodel.core.exceptions import NotTrainedError
from perfmodel.core.validation import (
    check_array,
    check_feature_count,
    check_finite,
    check_not_empty,
)
from perfmodel.regression import solvers
from perfmodel.regression.design import LabeledExample, N_FEATURES
from perfmodel.regression.solution import LinearSolution


class LinearRegression:
    """
    Linear model PRP = Σ θ_i · feature_i over the six hardware features.

    Example:
        >>> model = LinearRegression()
        >>> model.train(train_examples)
        >>> model.predict([125, 256, 6000, 256, 16, 128])
        >>> model.rmse(test_examples)
    """

    def __init__(self):
        self._solution: LinearSolution | None = None

    # === Training ===

    def train(self, examples: Iterable[LabeledExample]) -> LinearSolution:
        """
        Fit by ordinary least squares (normal equation).

        Raises:
            EmptyInputError: If no examples are given
            SingularMatrixError: If X'X is not invertible
        """
        solution = solvers.train(examples)
        self._solution = solution
        return solution

    def train_ridge(self, examples: Iterable[LabeledExample], ridge_lambda: float) -> LinearSolution:
        """
        Fit by ridge regression with penalty λ.

        Raises:
            EmptyInputError: If no examples are given
            SingularMatrixError: If X'X + λI is not invertible
        """
        solution = solvers.train_ridge(examples, ridge_lambda)
        self._solution = solution
        return solution

    # === State ===

    @property
    def is_trained(self) -> bool:
        return self._solution is not None

    @property
    def solution(self) -> LinearSolution:
        return self._require_trained()

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._require_trained().coefficients

    @property
    def ridge_lambda(self) -> float | None:
        return self._require_trained().ridge_lambda

    @property
    def training_rmse(self) -> float:
        return self._require_trained().training_rmse

    def _require_trained(self) -> LinearSolution:
        if self._solution is None:
            raise NotTrainedError("Model has not been trained yet")
        return self._solution

    # === Prediction ===

    def predict(self, features: Sequence[float] | LabeledExample) -> float:
        """
        Predict one score.

        Args:
            features: Six feature values in FEATURE_NAMES order, or a
                LabeledExample (its target is ignored)

        Raises:
            NotTrainedError: If the model has not been trained
            InvalidFeatureCountError: If features does not have six entries
            ValidationError: If a feature value is NaN or infinite
        """
        coefficients = self._require_trained().coefficients
        if isinstance(features, LabeledExample):
            features = features.features
        check_feature_count(features, N_FEATURES, 'features')
        values = check_array(features, 'features')
        check_finite(values, 'features')
        return float(np.dot(coefficients, values))

    def predict_all(self, examples: Iterable[LabeledExample]) -> NDArray[np.floating[Any]]:
        """Predictions for each example, in input order."""
        self._require_trained()
        return np.array([self.predict(ex) for ex in examples], dtype=np.float64)

    # === Scoring ===

    def _errors(self, examples: Iterable[LabeledExample]) -> tuple[NDArray, NDArray]:
        """Actual targets and prediction errors (predicted - actual)."""
        self._require_trained()
        examples = list(examples)
        check_not_empty(examples, 'examples')
        actual = np.array([ex.target for ex in examples], dtype=np.float64)
        return actual, self.predict_all(examples) - actual

    def mse(self, examples: Iterable[LabeledExample]) -> float:
        _, errors = self._errors(examples)
        return float(np.mean(errors ** 2))

    def rmse(self, examples: Iterable[LabeledExample]) -> float:
        return float(np.sqrt(self.mse(examples)))

    def mae(self, examples: Iterable[LabeledExample]) -> float:
        _, errors = self._errors(examples)
        return float(np.mean(np.abs(errors)))

    def r_squared(self, examples: Iterable[LabeledExample]) -> float:
        """
        Coefficient of determination on the given examples.

        TSS is taken around the mean of these examples' targets, not the
        training targets. Zero TSS gives 1.0.
        """
        actual, errors = self._errors(examples)
        tss = float(np.sum((actual - np.mean(actual)) ** 2))
        if tss == 0.0:
            return 1.0
        rss = float(np.sum(errors ** 2))
        return 1.0 - rss / tss

    # === Cross-validation ===

    def cross_validate(self, examples: Sequence[LabeledExample], k: int) -> float | None:
        """
        Mean held-out RMSE over k contiguous folds.

        Each fold trains its own fresh model; this instance is neither used
        nor modified. Returns None when no fold could be trained.
        """
        from perfmodel.regression.crossval import cross_validate
        return cross_validate(examples, k).mean_rmse

    # === Display ===

    def equation(self, precision: int = 6) -> str:
        return self._require_trained().equation(precision)

    def summary(self) -> str:
        return self._require_trained().summary()

    def __repr__(self) -> str:
        if self._solution is None:
            return "LinearRegression(trained=False)"
        coefs = ", ".join(f"{c:.6g}" for c in self._solution.coefficients)
        return f"LinearRegression(trained=True, coefficients=({coefs}))"
