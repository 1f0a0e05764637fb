"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from perfmodel.core.result import Result
from perfmodel.regression.design import FEATURE_NAMES, TARGET_NAME

if TYPE_CHECKING:
    from perfmodel.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for one training run.

    This is the immutable data computed by backends.
    """
    coefficients: tuple[float, ...]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    ridge_lambda: float | None


@dataclass
class LinearSolution:
    """
    User-facing training results.

    Wraps the backend Result and provides convenient accessors for the
    trained coefficients and in-sample diagnostics.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._result.params.coefficients

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def ridge_lambda(self) -> float | None:
        """Regularization strength, or None for ordinary least squares."""
        return self._result.params.ridge_lambda

    @property
    def n_observations(self) -> int:
        return self._design.n

    @property
    def r_squared(self) -> float:
        """In-sample R²; 1.0 when the training targets have no variance."""
        if self.tss == 0:
            return 1.0
        return 1.0 - (self.rss / self.tss)

    @property
    def training_rmse(self) -> float:
        return float(np.sqrt(self.rss / self._design.n))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def equation(self, precision: int = 6) -> str:
        """Model equation, e.g. 'PRP = 0.048810*MYCT + 0.015300*MMIN - ...'."""
        terms = []
        for i, (coef, name) in enumerate(zip(self.coefficients, FEATURE_NAMES)):
            magnitude = f"{abs(coef):.{precision}f}*{name}"
            if i == 0:
                terms.append(f"-{magnitude}" if coef < 0 else magnitude)
            else:
                terms.append(f"{'-' if coef < 0 else '+'} {magnitude}")
        return f"{TARGET_NAME} = " + " ".join(terms)

    def summary(self) -> str:
        """Text summary of the trained model."""
        method = "Ridge Regression" if self.ridge_lambda is not None else "Linear Regression"
        lines = [
            f"{method} Results (normal equation)",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Features: {self._design.p}",
        ]
        if self.ridge_lambda is not None:
            lines.append(f"Lambda: {self.ridge_lambda:g}")
        lines.extend([
            f"Training RMSE: {self.training_rmse:.4f}",
            f"R-squared: {self.r_squared:.6f}",
            "",
            "Coefficients:",
            "-" * 60,
        ])
        for name, coef in zip(FEATURE_NAMES, self.coefficients):
            lines.append(f"  {name:<6} {coef:14.6f}")
        lines.append("-" * 60)
        lines.append(self.equation())
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"ridge_lambda={self.ridge_lambda}, r_squared={self.r_squared:.4f})"
        )
