"""
Shared numeric infrastructure for pymath.

Submodules:
    precision: Numerical precision constants and utilities
    tolerances: Named tolerance tiers for float comparison
"""

from pymath.core.compute.precision import (
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    is_close,
)
from pymath.core.compute.tolerances import (
    ToleranceTier,
    DEFAULT,
    ACCUMULATED,
    select_tolerance,
)

__all__ = [
    # Precision
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
    "is_close",
    # Tolerances
    "ToleranceTier",
    "DEFAULT",
    "ACCUMULATED",
    "select_tolerance",
]
