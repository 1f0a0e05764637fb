"""
Model evaluation on a labeled example set.

evaluate() predicts every example with a trained model and bundles the
parallel predictions, actuals and residuals with the summary scores. A new
EvaluationResult is built on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from perfmodel.core.exceptions import NotTrainedError
from perfmodel.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
)
from perfmodel.metrics import scores

if TYPE_CHECKING:
    from perfmodel.regression.design import LabeledExample
    from perfmodel.regression.model import LinearRegression


@dataclass(frozen=True)
class EvaluationResult:
    """
    Predictions and error scores of a model on one example set.

    The three sequences are parallel: residuals[i] = actuals[i] - predictions[i].
    mape is in percent.
    """
    predictions: tuple[float, ...]
    actuals: tuple[float, ...]
    residuals: tuple[float, ...]
    rmse: float
    mse: float
    mae: float
    r_squared: float
    mape: float

    @property
    def n_samples(self) -> int:
        return len(self.predictions)

    def summary(self) -> str:
        return "\n".join([
            "=== Evaluation Results ===",
            f"RMSE:  {self.rmse:.4f}",
            f"MSE:   {self.mse:.4f}",
            f"MAE:   {self.mae:.4f}",
            f"R²:    {self.r_squared:.4f}",
            f"MAPE:  {self.mape:.4f}%",
            f"Samples: {self.n_samples}",
        ])


@dataclass(frozen=True)
class ResidualSummary:
    """
    Distribution of residuals.

    std is the population standard deviation (divides by n). The within_*
    counts include residuals whose magnitude equals the bound.
    """
    n: int
    mean: float
    std: float
    minimum: float
    maximum: float
    within_1_std: int
    within_2_std: int
    within_3_std: int

    def fraction_within(self, n_std: int) -> float:
        counts = {1: self.within_1_std, 2: self.within_2_std, 3: self.within_3_std}
        if n_std not in counts:
            raise ValueError(f"n_std must be 1, 2 or 3, got {n_std}")
        return counts[n_std] / self.n

    def summary(self) -> str:
        lines = [
            "=== Residual Analysis ===",
            f"Mean residual:           {self.mean:.4f}",
            f"Standard deviation:      {self.std:.4f}",
            f"Minimum residual:        {self.minimum:.4f}",
            f"Maximum residual:        {self.maximum:.4f}",
            "",
            "Residual Distribution:",
        ]
        for k in (1, 2, 3):
            count = getattr(self, f"within_{k}_std")
            lines.append(
                f"Within {k} std dev:  {count:6d} ({self.fraction_within(k) * 100:5.1f}%)"
            )
        return "\n".join(lines)


def evaluate(model: LinearRegression, examples: Iterable[LabeledExample]) -> EvaluationResult:
    """
    Evaluate a trained model on labeled examples.

    Raises:
        NotTrainedError: If the model has not been trained
        EmptyInputError: If no examples are given
    """
    if not model.is_trained:
        raise NotTrainedError("Model has not been trained yet")
    examples = list(examples)
    check_not_empty(examples, 'examples')

    predictions = model.predict_all(examples)
    actuals = np.array([ex.target for ex in examples], dtype=np.float64)

    return EvaluationResult(
        predictions=tuple(predictions.tolist()),
        actuals=tuple(actuals.tolist()),
        residuals=tuple(scores.residuals(actuals, predictions).tolist()),
        rmse=model.rmse(examples),
        mse=model.mse(examples),
        mae=model.mae(examples),
        r_squared=model.r_squared(examples),
        mape=scores.mape(actuals, predictions),
    )


def residual_analysis(residuals: ArrayLike | Sequence[float]) -> ResidualSummary:
    """
    Summary statistics of a residual sequence.

    Raises:
        EmptyInputError: If residuals is empty
    """
    r = check_array(residuals, 'residuals')
    check_1d(r, 'residuals')
    check_finite(r, 'residuals')
    check_not_empty(r, 'residuals')

    std = float(np.std(r))
    magnitude = np.abs(r)
    return ResidualSummary(
        n=len(r),
        mean=float(np.mean(r)),
        std=std,
        minimum=float(np.min(r)),
        maximum=float(np.max(r)),
        within_1_std=int(np.sum(magnitude <= std)),
        within_2_std=int(np.sum(magnitude <= 2 * std)),
        within_3_std=int(np.sum(magnitude <= 3 * std)),
    )
