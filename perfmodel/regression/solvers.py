"""
Solver entry points for regression.

This module provides train() and train_ridge() (public API). Each call
builds a design, runs the normal-equation backend and wraps the result.
"""

from typing import Iterable

from perfmodel.regression.backends.normal_equation import NormalEquationBackend
from perfmodel.regression.design import LabeledExample, RegressionDesign
from perfmodel.regression.solution import LinearSolution


def train(examples: Iterable[LabeledExample]) -> LinearSolution:
    """
    Fit by ordinary least squares.

    Solves θ = (X'X)⁻¹ X'y over the six features, without an intercept.

    Args:
        examples: Labeled examples (at least one; at least six linearly
            independent ones for X'X to be invertible)

    Returns:
        LinearSolution with coefficients and in-sample diagnostics

    Raises:
        EmptyInputError: If no examples are given
        SingularMatrixError: If X'X is not invertible

    Example:
        >>> from perfmodel.regression import train, LabeledExample
        >>> solution = train(examples)
        >>> print(solution.coefficients)
        >>> print(solution.summary())
    """
    design = RegressionDesign.from_examples(examples)
    result = NormalEquationBackend().solve(design)
    return LinearSolution(_result=result, _design=design)


def train_ridge(examples: Iterable[LabeledExample], ridge_lambda: float) -> LinearSolution:
    """
    Fit by ridge regression.

    Solves θ = (X'X + λI)⁻¹ X'y. Any positive λ makes the system
    invertible, which is how callers recover from a singular ordinary fit.

    Args:
        examples: Labeled examples (at least one)
        ridge_lambda: Penalty λ. Not checked for sign.

    Raises:
        EmptyInputError: If no examples are given
        SingularMatrixError: If X'X + λI is not invertible
    """
    design = RegressionDesign.from_examples(examples)
    result = NormalEquationBackend(ridge_lambda=ridge_lambda).solve(design)
    return LinearSolution(_result=result, _design=design)
