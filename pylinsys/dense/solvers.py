"""
Solver dispatch for dense linear systems.

This module provides the solve() function (public API) and backend selection.
"""

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinsys.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsys.core.validation import check_positive_float
from pylinsys.dense.design import SystemDesign
from pylinsys.dense.solution import DenseSolution
from pylinsys.dense.backends.cpu import CPUGaussBackend, CPULapackBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_gauss', 'cpu_lapack']


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    skip_first_n_rows: int = 0,
    backend: BackendChoice = 'auto',
    pivot_tolerance: float = PIVOT_TOLERANCE,
) -> DenseSolution:
    """
    Solve a dense linear system A x = b.

    This is the primary public API. All input validation, backend selection,
    and result wrapping happens here. The caller's arrays are copied, never
    modified; use LinearSystem directly to solve in place.

    Args:
        A: Coefficient matrix, n x n or flat row-major with n*n values
        b: Right-hand side (n,)
        skip_first_n_rows: Rows above this index are assumed already
            eliminated and receive no row operations (Gaussian backend only)
        backend: Computational backend to use:
            - 'auto': Gaussian elimination kernel
            - 'cpu' / 'cpu_gauss': Gaussian elimination kernel
            - 'cpu_lapack': LAPACK LU reference (SciPy)
        pivot_tolerance: Pivot magnitude at or below which pivot repair runs

    Returns:
        DenseSolution with solution vector, residuals and diagnostics

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If A does not hold n*n values for b of length n
        UnsolvableSystemError: If no usable pivot exists for some column

    Example:
        >>> import numpy as np
        >>> from pylinsys.dense import solve
        >>>
        >>> A = np.array([[4.0, 1.0], [2.0, 3.0]])
        >>> result = solve(A, [1.0, 2.0])
        >>> print(result.x)
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = SystemDesign.from_arrays(A, b, skip_first_n_rows=skip_first_n_rows)
    pivot_tolerance = check_positive_float(pivot_tolerance, 'pivot_tolerance')

    # === Select Backend ===
    backend_impl = _get_backend(backend, pivot_tolerance)

    # === Solve ===
    result = backend_impl.solve(design)

    if not result.info['residual_ok']:
        warnings.warn(
            f"residual norm {result.params.residual_norm:.3e} exceeds "
            f"{result.info['tolerance_tier']} tolerance "
            f"{result.info['residual_tolerance']:.3e}; the solution may be inaccurate",
            RuntimeWarning,
            stacklevel=2,
        )

    # === Wrap and Return ===
    return DenseSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, pivot_tolerance: float):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss'):
        return CPUGaussBackend(pivot_tolerance=pivot_tolerance)

    elif choice == 'cpu_lapack':
        return CPULapackBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
