"""
Evaluation metrics.

Public API:
    residuals, mse, rmse, mae, r_squared, mape   pure functions of (actual, predicted)
    evaluate(model, examples)   -> EvaluationResult
    residual_analysis(residuals) -> ResidualSummary
    report(model, examples)     -> str
"""

from perfmodel.metrics.scores import (
    residuals,
    mse,
    rmse,
    mae,
    r_squared,
    mape,
)
from perfmodel.metrics.evaluation import (
    EvaluationResult,
    ResidualSummary,
    evaluate,
    residual_analysis,
)
from perfmodel.metrics.report import prediction_table, report

__all__ = [
    "residuals",
    "mse",
    "rmse",
    "mae",
    "r_squared",
    "mape",
    "evaluate",
    "residual_analysis",
    "report",
    "prediction_table",
    "EvaluationResult",
    "ResidualSummary",
]
