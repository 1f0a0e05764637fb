"""
Tests for k-fold cross-validation.

Validates:
    - Fold boundaries (floor fold size, last fold absorbs the remainder)
    - Per-fold isolation: each fold equals an independently trained model
    - Skipped folds on singular training and the all-failed outcome
"""

import numpy as np
import pytest

from perfmodel.core.exceptions import EmptyInputError, ValidationError
from perfmodel.regression import (
    CrossValidationSolution,
    LabeledExample,
    LinearRegression,
    cross_validate,
    fold_boundaries,
)


def collinear_examples(rng, n):
    """Examples whose last four features are zero: X'X is always singular."""
    X = np.zeros((n, 6))
    X[:, :2] = rng.uniform(1.0, 10.0, size=(n, 2))
    return [LabeledExample(tuple(row), float(row[0] + row[1])) for row in X]


def covered_indices(folds):
    return [i for start, stop in folds for i in range(start, stop)]


class TestFoldBoundaries:

    def test_even_split(self):
        folds = fold_boundaries(25, 5)
        assert folds == [(0, 5), (5, 10), (10, 15), (15, 20), (20, 25)]

    def test_last_fold_absorbs_remainder(self):
        folds = fold_boundaries(23, 5)
        assert folds == [(0, 4), (4, 8), (8, 12), (12, 16), (16, 23)]
        assert [stop - start for start, stop in folds] == [4, 4, 4, 4, 7]

    @pytest.mark.parametrize("n,k", [(23, 5), (25, 5), (10, 3), (7, 7), (9, 1)])
    def test_partition_has_no_overlap_or_gap(self, n, k):
        folds = fold_boundaries(n, k)
        assert len(folds) == k
        assert covered_indices(folds) == list(range(n))

    def test_more_folds_than_examples(self):
        with pytest.raises(ValidationError, match="cannot be greater"):
            fold_boundaries(4, 5)

    def test_zero_folds(self):
        with pytest.raises(ValidationError):
            fold_boundaries(10, 0)


class TestCrossValidate:

    def test_returns_solution(self, hardware_data):
        examples, _, _ = hardware_data
        result = cross_validate(examples, 5)
        assert isinstance(result, CrossValidationSolution)
        assert result.n_folds == 5
        assert result.n_succeeded == 5
        assert result.succeeded
        assert result.warnings == ()

    def test_mean_is_average_of_folds(self, hardware_data):
        examples, _, _ = hardware_data
        result = cross_validate(examples, 4)
        assert result.mean_rmse == pytest.approx(np.mean(result.fold_rmses))
        assert result.mean_rmse >= 0.0

    def test_noiseless_data_has_near_zero_error(self, exact_linear_data):
        examples, _ = exact_linear_data
        assert cross_validate(examples, 5).mean_rmse < 1e-8

    def test_fold_matches_independent_model(self, hardware_data):
        examples, _, _ = hardware_data
        result = cross_validate(examples, 4)
        start, stop = result.folds[2]

        model = LinearRegression()
        model.train(examples[:start] + examples[stop:])
        assert result.fold_rmses[2] == model.rmse(examples[start:stop])

    def test_input_not_modified(self, hardware_data):
        examples, _, _ = hardware_data
        before = list(examples)
        cross_validate(examples, 5)
        assert examples == before

    def test_all_folds_fail(self, rng):
        examples = collinear_examples(rng, 10)
        with pytest.warns(RuntimeWarning, match="skipped"):
            result = cross_validate(examples, 5)
        assert result.mean_rmse is None
        assert not result.succeeded
        assert result.fold_rmses == (None,) * 5
        assert len(result.warnings) == 5
        assert all(w.startswith(f"fold {f + 1}/5 skipped") for f, w in enumerate(result.warnings))

    def test_failed_folds_are_excluded(self, rng):
        good = [LabeledExample(tuple(row), float(row.sum())) for row in rng.uniform(1, 10, (6, 6))]
        bad = collinear_examples(rng, 6)
        # fold 1 trains on `good` only; fold 2 trains on `bad` only
        with pytest.warns(RuntimeWarning):
            result = cross_validate(bad + good, 2)
        assert result.fold_rmses[0] is not None
        assert result.fold_rmses[1] is None
        assert result.mean_rmse == result.fold_rmses[0]
        assert result.n_succeeded == 1

    def test_single_fold_has_no_training_data(self, hardware_data):
        examples, _, _ = hardware_data
        with pytest.warns(RuntimeWarning):
            result = cross_validate(examples, 1)
        assert result.mean_rmse is None

    def test_ridge_recovers_singular_folds(self, rng):
        examples = collinear_examples(rng, 10)
        result = cross_validate(examples, 5, ridge_lambda=1.0)
        assert result.n_succeeded == 5
        assert result.info['ridge_lambda'] == 1.0

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            cross_validate([], 3)

    def test_summary(self, hardware_data):
        text = cross_validate(hardware_data[0], 3).summary()
        assert "Cross-validation results (3 folds)" in text
        assert "Average RMSE" in text
