"""
Numerical tolerances.

PIVOT_TOLERANCE is the single stability knob of the elimination routines:
a pivot whose magnitude falls below it marks the matrix as singular, both
when inverting (error) and when computing a determinant (zero).

Tolerance tiers are used by Matrix.allclose() and by the test suite when
comparing results that went through elimination against references.
"""

from dataclasses import dataclass


PIVOT_TOLERANCE = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned elimination in double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-8,
    name='fp64',
    description='Double precision, well-conditioned elimination',
)

# Elimination on ill-conditioned systems such as raw hardware features,
# where X'X spans many orders of magnitude
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='Double precision, ill-conditioned elimination',
)

