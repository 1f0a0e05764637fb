"""
Per-column descriptive statistics of machine records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from perfmodel.core.validation import check_not_empty
from perfmodel.datasets.machine import MachineRecord
from perfmodel.regression.design import FEATURE_NAMES, TARGET_NAME


@dataclass(frozen=True)
class ColumnSummary:
    """Min, max, mean and population standard deviation of one column."""
    name: str
    minimum: float
    maximum: float
    mean: float
    std: float

    def format(self) -> str:
        return (
            f"{self.name:>8}: Min={self.minimum:8.2f}, Max={self.maximum:8.2f}, "
            f"Mean={self.mean:8.2f}, Std={self.std:8.2f}"
        )


def describe(records: Sequence[MachineRecord]) -> tuple[ColumnSummary, ...]:
    """
    Summaries for the six features and the PRP target, in that order.

    Raises:
        EmptyInputError: If records is empty
    """
    check_not_empty(records, 'records')
    table = np.array(
        [(*r.features, r.prp) for r in records],
        dtype=np.float64,
    )
    names = FEATURE_NAMES + (TARGET_NAME,)
    return tuple(
        ColumnSummary(
            name=name,
            minimum=float(col.min()),
            maximum=float(col.max()),
            mean=float(col.mean()),
            std=float(col.std()),
        )
        for name, col in zip(names, table.T)
    )
