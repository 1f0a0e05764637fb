"""
Train/test splitting.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

from perfmodel.core.exceptions import ValidationError

T = TypeVar('T')


def train_test_split(
    items: Sequence[T],
    train_ratio: float = 0.8,
    *,
    seed: int | None = None,
) -> tuple[list[T], list[T]]:
    """
    Shuffle and split into a training and a test list.

    The training list gets int(n * train_ratio) items, the test list the
    rest. The input is not modified.

    Args:
        items: Records or examples to split
        train_ratio: Fraction for training, in [0, 1]
        seed: Seed for numpy's default_rng; None draws fresh entropy

    Raises:
        ValidationError: If train_ratio is outside [0, 1]
    """
    if not 0.0 <= train_ratio <= 1.0:
        raise ValidationError(
            f"train_ratio: must be between 0 and 1, got {train_ratio}"
        )

    items = list(items)
    order = np.random.default_rng(seed).permutation(len(items))
    shuffled = [items[i] for i in order]

    n_train = int(len(items) * train_ratio)
    return shuffled[:n_train], shuffled[n_train:]
