"""
Dense solve solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.result import Result

if TYPE_CHECKING:
    from pylinsys.dense.design import SystemDesign


@dataclass(frozen=True)
class DenseParams:
    """
    Parameter payload for a dense solve.

    This is the immutable data computed by backends. Residuals are taken
    against the original (unmodified) system: b - A @ x.
    """
    x: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    residual_norm: float
    rhs_norm: float


@dataclass
class DenseSolution:
    """
    User-facing solve results.

    Wraps the backend Result and provides accessors for the solution
    vector, residual diagnostics, and pivot-repair bookkeeping.
    """
    _result: Result[DenseParams]
    _design: 'SystemDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

    @property
    def relative_residual(self) -> float:
        """||b - A x|| / ||b||, or the absolute norm when b is zero."""
        rhs_norm = self._result.params.rhs_norm
        if rhs_norm == 0:
            return self.residual_norm
        return self.residual_norm / rhs_norm

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def pivot_repairs(self) -> tuple[tuple[int, int], ...]:
        return tuple(tuple(p) for p in self._result.info.get('pivot_repairs', ()))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Plain-text report of the solve."""
        lines = [
            "Dense Linear System Solution",
            "=" * 60,
            f"Unknowns: {self.n}",
            f"Skipped rows: {self._design.skip_first_n_rows}",
            f"Pivot repairs: {len(self.pivot_repairs)}",
            f"Residual norm: {self.residual_norm:.6e}",
            f"Relative residual: {self.relative_residual:.6e}",
            "",
            "Solution:",
            f"{'Index':>8} {'Value':>22}",
            "-" * 31,
        ]
        for i, value in enumerate(self.x):
            lines.append(f"{i:>8} {value:>22.15g}")

        lines.append("")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)
