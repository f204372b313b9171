"""
Tolerance tiers for numerical comparison.

Defines precision expectations for matrix results:
- DEFAULT: a single float64 operation (add, sub, one product)
- ACCUMULATED: chains of products, where rounding compounds

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

from pymath.core.compute.precision import DEFAULT_ATOL, DEFAULT_RTOL


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


DEFAULT = ToleranceTier(
    rtol=DEFAULT_RTOL,
    atol=DEFAULT_ATOL,
    name='default',
    description='float64, one operation deep',
)

# (AB)C vs A(BC), inverse laws over random data
ACCUMULATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-11,
    name='accumulated',
    description='float64, several chained products',
)


def select_tolerance(accumulated: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a comparison."""
    if accumulated:
        return ACCUMULATED
    return DEFAULT
