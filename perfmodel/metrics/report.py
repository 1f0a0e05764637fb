"""
Plain-text evaluation report.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

from perfmodel.metrics.evaluation import evaluate, residual_analysis

if TYPE_CHECKING:
    from perfmodel.regression.design import LabeledExample
    from perfmodel.regression.model import LinearRegression


def _percent_error(actual: float, residual: float) -> str:
    if actual == 0.0:
        return f"{'n/a':>11} "
    return f"{abs(residual / actual) * 100.0:11.2f}%"


def prediction_table(
    actuals: tuple[float, ...],
    predictions: tuple[float, ...],
    residuals: tuple[float, ...],
    n_samples: int = 10,
) -> str:
    """Fixed-width actual / predicted / residual / % error table."""
    lines = [
        f"{'Index':>6}{'Actual':>10}{'Predicted':>12}{'Residual':>12}{'% Error':>12}",
        "-" * 52,
    ]
    shown = min(n_samples, len(actuals))
    for i in range(shown):
        lines.append(
            f"{i:6d}{actuals[i]:10.2f}{predictions[i]:12.2f}{residuals[i]:12.2f}"
            f"{_percent_error(actuals[i], residuals[i])}"
        )
    return "\n".join(lines)


def report(
    model: LinearRegression,
    examples: Iterable[LabeledExample],
    n_samples: int = 10,
) -> str:
    """
    Full evaluation report: equation, metrics, residuals, sample predictions.

    Raises:
        NotTrainedError: If the model has not been trained
        EmptyInputError: If no examples are given
    """
    results = evaluate(model, examples)
    residual_stats = residual_analysis(results.residuals)

    lines = [
        "=====================================",
        "    LINEAR REGRESSION EVALUATION",
        "=====================================",
        "",
        "Model Equation:",
        model.equation(),
        "",
        "Performance Metrics:",
        "-------------------",
        f"Root Mean Square Error (RMSE):  {results.rmse:.4f}",
        f"Mean Square Error (MSE):        {results.mse:.4f}",
        f"Mean Absolute Error (MAE):      {results.mae:.4f}",
        f"R-squared (R²):                 {results.r_squared:.4f}",
        f"Mean Absolute Percentage Error: {results.mape:.4f}%",
        f"Number of test samples:         {results.n_samples}",
        "",
        residual_stats.summary(),
        "",
        f"Sample Predictions (first {min(n_samples, results.n_samples)}):",
        prediction_table(results.actuals, results.predictions, results.residuals, n_samples),
    ]
    return "\n".join(lines)
