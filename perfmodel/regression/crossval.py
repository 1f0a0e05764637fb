"""
K-fold cross-validation.

Folds are contiguous and taken in input order, without shuffling:

    fold_size = n // k
    fold f < k-1  covers [f * fold_size, (f + 1) * fold_size)
    fold k-1      covers [(k - 1) * fold_size, n)

so the last fold absorbs the remainder. For n=23, k=5 the folds have
sizes 4, 4, 4, 4, 7.
"""

from __future__ import annotations

import operator
import warnings
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from perfmodel.core.exceptions import PerfModelError, ValidationError
from perfmodel.core.result import Result
from perfmodel.core.timing import Timer
from perfmodel.core.validation import check_not_empty
from perfmodel.regression.design import LabeledExample
from perfmodel.regression.model import LinearRegression


@dataclass(frozen=True)
class CrossValidationParams:
    """
    Per-fold outcome of a cross-validation run.

    fold_rmses[f] is None when fold f was skipped because training failed.
    mean_rmse is None when every fold was skipped.
    """
    folds: tuple[tuple[int, int], ...]
    fold_rmses: tuple[float | None, ...]
    mean_rmse: float | None


@dataclass
class CrossValidationSolution:
    """User-facing cross-validation results."""
    _result: Result[CrossValidationParams]

    @property
    def folds(self) -> tuple[tuple[int, int], ...]:
        """Half-open (start, stop) index range of each validation fold."""
        return self._result.params.folds

    @property
    def fold_rmses(self) -> tuple[float | None, ...]:
        return self._result.params.fold_rmses

    @property
    def mean_rmse(self) -> float | None:
        return self._result.params.mean_rmse

    @property
    def n_folds(self) -> int:
        return len(self.folds)

    @property
    def n_succeeded(self) -> int:
        return sum(r is not None for r in self.fold_rmses)

    @property
    def succeeded(self) -> bool:
        return self.mean_rmse is not None

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [f"Cross-validation results ({self.n_folds} folds):"]
        for f, ((start, stop), rmse) in enumerate(zip(self.folds, self.fold_rmses)):
            score = "skipped" if rmse is None else f"RMSE: {rmse:.4f}"
            lines.append(f"  Fold {f + 1} [{start}, {stop}) {score}")
        if self.mean_rmse is None:
            lines.append("  No fold could be trained")
        else:
            lines.append(f"  Average RMSE: {self.mean_rmse:.4f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CrossValidationSolution(k={self.n_folds}, "
            f"succeeded={self.n_succeeded}, mean_rmse={self.mean_rmse})"
        )


def fold_boundaries(n: int, k: int) -> list[tuple[int, int]]:
    """
    Half-open index ranges of the k validation folds over n examples.

    Raises:
        ValidationError: If k < 1 or k > n
    """
    k = operator.index(k)
    if k < 1:
        raise ValidationError(f"k: number of folds must be at least 1, got {k}")
    if k > n:
        raise ValidationError(
            f"k: number of folds ({k}) cannot be greater than dataset size ({n})"
        )

    fold_size = n // k
    bounds = [(f * fold_size, (f + 1) * fold_size) for f in range(k - 1)]
    bounds.append(((k - 1) * fold_size, n))
    return bounds


def cross_validate(
    examples: Sequence[LabeledExample],
    k: int,
    *,
    ridge_lambda: float | None = None,
) -> CrossValidationSolution:
    """
    K-fold cross-validation of the normal-equation model.

    For each fold a fresh LinearRegression is trained on the other folds
    (ordinary least squares, or ridge when ridge_lambda is given) and its
    RMSE on the held-out fold is recorded. Folds whose training fails, for
    example because X'X is singular, are skipped with a RuntimeWarning and
    do not enter the mean.

    Args:
        examples: Labeled examples, in the order folds are cut from
        k: Number of folds, 1 <= k <= len(examples)
        ridge_lambda: Optional ridge penalty for every fold

    Returns:
        CrossValidationSolution; its mean_rmse is None when no fold trained

    Raises:
        EmptyInputError: If no examples are given
        ValidationError: If k is out of range
    """
    examples = list(examples)
    check_not_empty(examples, 'examples')
    folds = fold_boundaries(len(examples), k)

    timer = Timer()
    timer.start()

    fold_rmses: list[float | None] = []
    skipped: list[str] = []
    for f, (start, stop) in enumerate(folds):
        validation = examples[start:stop]
        training = examples[:start] + examples[stop:]

        model = LinearRegression()
        with timer.section('training'):
            try:
                if ridge_lambda is None:
                    model.train(training)
                else:
                    model.train_ridge(training, ridge_lambda)
            except PerfModelError as e:
                message = f"fold {f + 1}/{k} skipped: training failed ({e})"
                warnings.warn(message, RuntimeWarning, stacklevel=2)
                skipped.append(message)
                fold_rmses.append(None)
                continue

        with timer.section('scoring'):
            fold_rmses.append(model.rmse(validation))

    timer.stop()

    recorded = [r for r in fold_rmses if r is not None]
    mean_rmse = float(np.mean(recorded)) if recorded else None

    params = CrossValidationParams(
        folds=tuple(folds),
        fold_rmses=tuple(fold_rmses),
        mean_rmse=mean_rmse,
    )
    result = Result(
        params=params,
        info={
            'k': k,
            'n': len(examples),
            'fold_size': len(examples) // k,
            'ridge_lambda': ridge_lambda,
        },
        timing=timer.result(),
        backend_name='normal_equation' if ridge_lambda is None else 'ridge_normal_equation',
        warnings=tuple(skipped),
    )
    return CrossValidationSolution(_result=result)
