"""
Tests for train_test_split.
"""

import pytest

from perfmodel.core.exceptions import ValidationError
from perfmodel.datasets import train_test_split


class TestTrainTestSplit:

    def test_sizes(self):
        train, test = train_test_split(list(range(209)), 0.8, seed=1)
        assert (len(train), len(test)) == (167, 42)

    def test_partition(self):
        items = list(range(50))
        train, test = train_test_split(items, 0.7, seed=3)
        assert sorted(train + test) == items

    def test_reproducible_with_seed(self):
        items = list(range(30))
        assert train_test_split(items, seed=7) == train_test_split(items, seed=7)

    def test_input_not_modified(self):
        items = list(range(20))
        train_test_split(items, seed=0)
        assert items == list(range(20))

    @pytest.mark.parametrize("ratio,n_train", [(0.0, 0), (1.0, 10)])
    def test_boundary_ratios(self, ratio, n_train):
        train, test = train_test_split(list(range(10)), ratio, seed=0)
        assert len(train) == n_train
        assert len(test) == 10 - n_train

    @pytest.mark.parametrize("ratio", [-0.1, 1.5])
    def test_invalid_ratio(self, ratio):
        with pytest.raises(ValidationError):
            train_test_split([1, 2, 3], ratio)
