"""
Shared compute infrastructure for pylinsys.

This module provides timing utilities, tolerance tiers, and the linear
algebra kernels shared by every solver front end.

IMPORTANT: This is NOT where front-end backends live. Those go in
{frontend}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot threshold and verification tolerance tiers
    linalg: Linear algebra kernels (Gaussian elimination)
"""

from pylinsys.core.compute.timing import Timer, timed
from pylinsys.core.compute.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    PIVOT_TOLERANCE,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ILL_CONDITIONED_THRESHOLD",
    "PIVOT_TOLERANCE",
    "ToleranceTier",
    "select_tolerance",
]
