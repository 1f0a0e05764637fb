"""
UCI "Computer Hardware" dataset (machine.data).

Each line holds ten comma-separated fields:

    vendor, model, MYCT, MMIN, MMAX, CACH, CHMIN, CHMAX, PRP, ERP

MYCT is the machine cycle time in nanoseconds, MMIN/MMAX the minimum and
maximum main memory in kilobytes, CACH the cache size in kilobytes,
CHMIN/CHMAX the minimum and maximum number of channels, PRP the published
relative performance (the regression target) and ERP the relative
performance estimated by the dataset's original authors.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from perfmodel.core.exceptions import EmptyInputError, ValidationError
from perfmodel.regression.design import LabeledExample


N_COLUMNS = 10

COLUMN_NAMES = (
    'vendor', 'model', 'MYCT', 'MMIN', 'MMAX', 'CACH', 'CHMIN', 'CHMAX', 'PRP', 'ERP',
)


@dataclass(frozen=True)
class MachineRecord:
    """One row of machine.data."""
    vendor: str
    model: str
    myct: int
    mmin: int
    mmax: int
    cach: int
    chmin: int
    chmax: int
    prp: int
    erp: int

    @property
    def features(self) -> tuple[int, ...]:
        """(MYCT, MMIN, MMAX, CACH, CHMIN, CHMAX)."""
        return (self.myct, self.mmin, self.mmax, self.cach, self.chmin, self.chmax)

    def to_example(self) -> LabeledExample:
        return LabeledExample(features=self.features, target=self.prp)

    def format(self) -> str:
        return f"{self.vendor:>12}{self.model:>15}" + "".join(
            f"{v:8d}" for v in (*self.features, self.prp, self.erp)
        )


def parse_machine_line(line: str) -> MachineRecord:
    """
    Parse one machine.data line.

    Raises:
        ValidationError: If the line does not have ten fields or a numeric
            field is not an integer
    """
    tokens = [t.strip() for t in line.strip().split(',')]
    if len(tokens) != N_COLUMNS:
        raise ValidationError(
            f"expected {N_COLUMNS} columns, got {len(tokens)}"
        )

    values = []
    for name, token in zip(COLUMN_NAMES[2:], tokens[2:]):
        try:
            values.append(int(token))
        except ValueError as e:
            raise ValidationError(f"{name}: not an integer: {token!r}") from e

    return MachineRecord(tokens[0], tokens[1], *values)


def parse_machine_lines(lines: Iterable[str]) -> list[MachineRecord]:
    """
    Parse machine.data content.

    Blank lines are ignored. Malformed lines are skipped with a UserWarning
    naming the 1-based line number.
    """
    records = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_machine_line(line))
        except ValidationError as e:
            warnings.warn(
                f"line {line_number}: {e}; skipping",
                UserWarning,
                stacklevel=2,
            )
    return records


def load_machine_data(path: str | Path) -> list[MachineRecord]:
    """
    Load machine.data from disk.

    Raises:
        OSError: If the file cannot be read
        ValidationError: If the file is not UTF-8 text
        EmptyInputError: If the file yields no valid records
    """
    path = Path(path)
    try:
        with path.open(encoding='utf-8') as f:
            records = parse_machine_lines(f)
    except UnicodeDecodeError as e:
        raise ValidationError(
            f"{path}: not UTF-8 text ({e.reason} at byte {e.start})"
        ) from e

    if not records:
        raise EmptyInputError(f"{path}: no valid records")
    return records


def to_examples(records: Iterable[MachineRecord]) -> list[LabeledExample]:
    return [r.to_example() for r in records]
