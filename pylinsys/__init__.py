"""
pylinsys: dense linear system solving for simulation loops.

Solves A x = b by Gaussian elimination, either in place on caller-owned
flat buffers (LinearSystem) or non-destructively with residual
diagnostics (dense.solve).

Submodules:
    core: Exceptions, validation, timing, tolerances, elimination kernel
    dense: High-level solve() front end
"""

__version__ = "0.1.0"

from pylinsys import dense
from pylinsys.core.compute.linalg.gauss import LinearSystem, gauss_solve_inplace

__all__ = [
    "__version__",
    "dense",
    "LinearSystem",
    "gauss_solve_inplace",
]
