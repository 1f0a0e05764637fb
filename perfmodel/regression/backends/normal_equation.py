"""
Normal-equation backend for linear regression.

Solves the least squares problem in closed form with the dense Matrix
type:

    ordinary:  θ = (X'X)⁻¹ X'y
    ridge:     θ = (X'X + λI)⁻¹ X'y

The model has no intercept column; θ has one entry per feature.
"""

from typing import Any
import numpy as np

from perfmodel.core.exceptions import SingularMatrixError
from perfmodel.core.result import Result
from perfmodel.core.timing import Timer
from perfmodel.linalg import Matrix
from perfmodel.regression.design import RegressionDesign
from perfmodel.regression.solution import LinearParams


class NormalEquationBackend:
    """
    Closed-form backend using Gauss-Jordan inversion of the Gram matrix.

    Args:
        ridge_lambda: None for ordinary least squares, otherwise the ridge
            penalty added to the diagonal of X'X. The sign is not checked;
            a negative value simply enters the algebra. 0.0 gives the same
            coefficients as ordinary least squares.
    """

    def __init__(self, ridge_lambda: float | None = None):
        self._lambda = None if ridge_lambda is None else float(ridge_lambda)

    @property
    def name(self) -> str:
        return 'normal_equation' if self._lambda is None else 'ridge_normal_equation'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve for the coefficient vector.

        Algorithm:
            1. Xt = X', G = Xt X (plus λI for ridge)
            2. G⁻¹ by Gauss-Jordan with partial pivoting
            3. θ = G⁻¹ (Xt y)
            4. Fitted values, residuals, RSS and TSS on the training set

        Raises:
            SingularMatrixError: If G is singular (for ordinary training this
                happens with fewer than 6 independent examples or collinear
                features; ridge training is the remedy)
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        gram_name = "X'X" if self._lambda is None else "X'X + lambda*I"

        with timer.section('gram_matrix'):
            Xt = X.transpose()
            gram = Xt @ X
            if self._lambda is not None:
                gram = gram + Matrix.identity(design.p) * self._lambda

        with timer.section('inverse'):
            try:
                gram_inv = gram.inverse()
            except SingularMatrixError as e:
                raise SingularMatrixError(
                    f"{gram_name} is singular: {e}",
                    matrix_name=gram_name,
                    pivot_column=e.pivot_column,
                    pivot_value=e.pivot_value,
                    tolerance=e.tolerance,
                ) from e

        with timer.section('solve'):
            Xty = Xt @ y
            theta = gram_inv @ Xty

        with timer.section('residuals'):
            fitted = (X @ theta).to_numpy().ravel()
            actual = y.to_numpy().ravel()
            residuals = actual - fitted
            rss = float(residuals @ residuals)
            tss = float(np.sum((actual - np.mean(actual)) ** 2))

        timer.stop()

        params = LinearParams(
            coefficients=tuple(theta[i, 0] for i in range(design.p)),
            fitted_values=fitted,
            residuals=residuals,
            rss=rss,
            tss=tss,
            ridge_lambda=self._lambda,
        )

        info: dict[str, Any] = {
            'method': 'normal_equation' if self._lambda is None else 'ridge',
            'lambda': self._lambda,
            'n': design.n,
            'p': design.p,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
