"""
Numerical precision constants and utilities.

Provides default comparison tolerances and the closeness
test used by Matrix.allclose.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def is_close(
    a: float | NDArray[np.floating[Any]], 
    b: float | NDArray[np.floating[Any]], 
    rtol: float = DEFAULT_RTOL, 
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.
    
    Uses the formula: |a - b| <= atol + rtol * |b|
    
    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance
        
    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
