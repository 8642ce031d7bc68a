"""
Linear algebra kernels for pylinsys.

All kernels follow these conventions:
    - Inputs are validated once, at construction, and trusted afterwards
    - In-place kernels write through the caller's buffers and allocate nothing
    - Errors are raised immediately with clear messages

Submodules:
    gauss: In-place Gaussian elimination with pivot repair
"""

from pylinsys.core.compute.linalg.gauss import (
    GaussResult,
    LinearSystem,
    gauss_solve_inplace,
)

__all__ = [
    "GaussResult",
    "LinearSystem",
    "gauss_solve_inplace",
]
