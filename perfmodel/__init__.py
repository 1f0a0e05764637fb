"""
perfmodel: relative CPU performance prediction by linear regression.

Fits PRP = Σ θ_i · feature_i over six hardware attributes with the normal
equation, solved by a small dense Matrix type with Gauss-Jordan inversion.

Submodules:
    linalg: Dense Matrix with checked arithmetic, inverse and determinant
    regression: Ordinary and ridge training, prediction, cross-validation
    metrics: Error metrics, evaluation and reporting
    datasets: UCI machine.data loading, splitting, descriptive statistics
"""

__version__ = "0.1.0"

from perfmodel import linalg
from perfmodel import regression
from perfmodel import metrics
from perfmodel import datasets

__all__ = [
    "__version__",
    "linalg",
    "regression",
    "metrics",
    "datasets",
]
