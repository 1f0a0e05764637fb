"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from perfmodel.regression import LabeledExample


# Realistic ranges for (MYCT, MMIN, MMAX, CACH, CHMIN, CHMAX)
FEATURE_RANGES = (
    (17, 1500),
    (64, 32000),
    (64, 64000),
    (0, 256),
    (0, 52),
    (0, 176),
)

HARDWARE_COEFFICIENTS = np.array([-0.02, 0.015, 0.005, 0.6, -0.4, 1.4])


def make_hardware_table(rng, n):
    """Integer feature table (n x 6) with realistic column ranges."""
    return np.column_stack([
        rng.integers(low, high, size=n, endpoint=True)
        for low, high in FEATURE_RANGES
    ]).astype(np.float64)


def to_examples(X, y):
    return [LabeledExample(tuple(row), target) for row, target in zip(X, y)]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_linear_data(rng):
    """
    Well-conditioned noiseless data with target = 2*f1 + 3*f2.

    All six features vary; only the first two carry signal.
    """
    X = rng.uniform(1.0, 10.0, size=(30, 6))
    beta_true = np.array([2.0, 3.0, 0.0, 0.0, 0.0, 0.0])
    y = X @ beta_true
    return to_examples(X, y), beta_true


@pytest.fixture
def hardware_data(rng):
    """Hardware-like integer features with a noisy linear target."""
    X = make_hardware_table(rng, 80)
    y = X @ HARDWARE_COEFFICIENTS + rng.standard_normal(80) * 5.0
    return to_examples(X, y), X, y


@pytest.fixture
def machine_lines(rng):
    """Forty well-formed machine.data lines with integer PRP targets."""
    X = make_hardware_table(rng, 40).astype(int)
    prp = np.maximum(np.rint(X @ HARDWARE_COEFFICIENTS + rng.standard_normal(40) * 5.0), 1)
    return [
        ",".join([f"vendor{i % 4}", f"model-{i}", *map(str, row), str(int(p)), str(int(p) + 3)])
        for i, (row, p) in enumerate(zip(X, prp))
    ]


@pytest.fixture
def machine_file(tmp_path, machine_lines):
    path = tmp_path / "machine.data"
    path.write_text("\n".join(machine_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def rank_deficient_examples():
    """Three examples; only the first three features are non-zero."""
    return [
        LabeledExample((1.0, 2.0, 3.0, 0.0, 0.0, 0.0), 10.0),
        LabeledExample((4.0, 5.0, 6.0, 0.0, 0.0, 0.0), 20.0),
        LabeledExample((7.0, 8.0, 10.0, 0.0, 0.0, 0.0), 30.0),
    ]
