"""
Dataset ingestion for the UCI Computer Hardware data.

Public API:
    load_machine_data(path)       -> list[MachineRecord]
    parse_machine_line(line)      -> MachineRecord
    to_examples(records)          -> list[LabeledExample]
    train_test_split(items, ...)  -> (train, test)
    describe(records)             -> tuple[ColumnSummary, ...]
"""

from perfmodel.datasets.machine import (
    COLUMN_NAMES,
    MachineRecord,
    load_machine_data,
    parse_machine_line,
    parse_machine_lines,
    to_examples,
)
from perfmodel.datasets.split import train_test_split
from perfmodel.datasets.describe import ColumnSummary, describe

__all__ = [
    "COLUMN_NAMES",
    "MachineRecord",
    "load_machine_data",
    "parse_machine_line",
    "parse_machine_lines",
    "to_examples",
    "train_test_split",
    "describe",
    "ColumnSummary",
]
