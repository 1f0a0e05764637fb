"""
Dense linear algebra.

Public API:
    Matrix  - checked dense matrix with Gauss-Jordan inverse and determinant
"""

from perfmodel.linalg.matrix import Matrix

__all__ = [
    "Matrix",
]
