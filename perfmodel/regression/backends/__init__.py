"""
Regression backends.

Available backends:
    NormalEquationBackend: closed-form OLS and ridge via Gauss-Jordan inverse
"""

from perfmodel.regression.backends.normal_equation import NormalEquationBackend

__all__ = [
    "NormalEquationBackend",
]
