"""
Linear regression by the normal equation.

Public API:
    train(examples)              -> LinearSolution   (ordinary least squares)
    train_ridge(examples, lam)   -> LinearSolution   (ridge)
    cross_validate(examples, k)  -> CrossValidationSolution
    LinearRegression             stateful model: train, predict, score

Example:
    >>> from perfmodel.regression import LinearRegression, LabeledExample
    >>> model = LinearRegression()
    >>> model.train(examples)
    >>> model.predict([125, 256, 6000, 256, 16, 128])
"""

from perfmodel.regression.design import (
    FEATURE_NAMES,
    N_FEATURES,
    TARGET_NAME,
    LabeledExample,
    RegressionDesign,
)
from perfmodel.regression.solution import LinearSolution, LinearParams
from perfmodel.regression.solvers import train, train_ridge
from perfmodel.regression.model import LinearRegression
from perfmodel.regression.crossval import (
    CrossValidationParams,
    CrossValidationSolution,
    cross_validate,
    fold_boundaries,
)

__all__ = [
    "train",
    "train_ridge",
    "cross_validate",
    "fold_boundaries",
    "LinearRegression",
    "LabeledExample",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
    "CrossValidationSolution",
    "CrossValidationParams",
    "FEATURE_NAMES",
    "N_FEATURES",
    "TARGET_NAME",
]
