"""
Generic result container for all pylinsys computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing and diagnostics while
allowing each solver family to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivot repairs, tolerances)
    - timing is optional (don't burden unit tests)
    - provenance records library versions so a result can be reproduced
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    from pylinsys import __version__
    return {
        'pylinsys_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear system solves.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Solver-specific payload (solution vector, residuals, ...)
        info: Structured metadata (method, pivot repairs, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=DenseParams(x=x, residuals=r, residual_norm=0.0, rhs_norm=1.0),
        ...     info={'method': 'gauss', 'n': 9, 'pivot_repairs': []},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
