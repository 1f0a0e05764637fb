"""
Regression Design.

A design turns labeled examples into the n x 6 design matrix X and the
n x 1 target matrix y. Feature order is fixed by position: an example's
features are always (MYCT, MMIN, MMAX, CACH, CHMIN, CHMAX).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from perfmodel.core.validation import (
    check_array,
    check_feature_count,
    check_finite,
    check_not_empty,
)
from perfmodel.linalg import Matrix


N_FEATURES = 6

FEATURE_NAMES = ('MYCT', 'MMIN', 'MMAX', 'CACH', 'CHMIN', 'CHMAX')
TARGET_NAME = 'PRP'


@dataclass(frozen=True)
class LabeledExample:
    """
    One training or evaluation example.

    Attributes:
        features: Exactly six values in FEATURE_NAMES order
        target: Observed performance score
    """
    features: tuple[float, ...]
    target: float

    def __post_init__(self) -> None:
        check_feature_count(self.features, N_FEATURES, 'features')
        features = check_array(self.features, 'features')
        check_finite(features, 'features')
        target = float(self.target)
        check_finite(np.array([target]), 'target')
        object.__setattr__(self, 'features', tuple(features.tolist()))
        object.__setattr__(self, 'target', target)


@dataclass(frozen=True)
class RegressionDesign:
    """
    Design matrix and target for a set of examples.

    Immutable after construction. The matrices are built once and owned
    by the design; callers must not mutate them.
    """
    _X: Matrix
    _y: Matrix
    _n: int
    _p: int

    @classmethod
    def from_examples(cls, examples: Iterable[LabeledExample]) -> RegressionDesign:
        """
        Build the design from labeled examples.

        Raises:
            EmptyInputError: If no examples are given
        """
        examples = list(examples)
        check_not_empty(examples, 'examples')

        X = Matrix.from_rows([ex.features for ex in examples])
        y = Matrix.from_rows([[ex.target] for ex in examples])
        return cls(_X=X, _y=y, _n=len(examples), _p=N_FEATURES)

    @property
    def X(self) -> Matrix:
        """Design matrix (n x 6)."""
        return self._X

    @property
    def y(self) -> Matrix:
        """Target vector as an n x 1 matrix."""
        return self._y

    @property
    def n(self) -> int:
        """Number of examples."""
        return self._n

    @property
    def p(self) -> int:
        """Number of features."""
        return self._p
