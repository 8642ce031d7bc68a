"""
Dense linear systems.

Public API:
    solve(A, b, ...) -> DenseSolution

The solve() function is the only entry point. It handles:
    - Input validation
    - Design construction (private copies of A and b)
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinsys.dense import solve
    >>> result = solve(A, b)
    >>> print(result.x)
    >>> print(result.summary())
"""

from pylinsys.dense.design import SystemDesign
from pylinsys.dense.solution import DenseSolution, DenseParams
from pylinsys.dense.solvers import solve

__all__ = [
    "solve",
    "SystemDesign",
    "DenseSolution",
    "DenseParams",
]
