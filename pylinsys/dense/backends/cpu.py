"""
CPU backends for dense linear systems.

CPUGaussBackend runs the in-place Gaussian elimination kernel on private
copies of the system. CPULapackBackend solves the same system with LU
decomposition via LAPACK (through SciPy) and serves as the reference
implementation the kernel is checked against.
"""

from typing import Any
import numpy as np

from pylinsys.core.result import Result
from pylinsys.core.exceptions import UnsolvableSystemError
from pylinsys.core.compute.timing import timed
from pylinsys.core.compute.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    PIVOT_TOLERANCE,
    select_tolerance,
)
from pylinsys.core.compute.linalg.gauss import LinearSystem
from pylinsys.dense.design import SystemDesign
from pylinsys.dense.solution import DenseParams


def _build_params(design: SystemDesign, x: np.ndarray) -> DenseParams:
    """Residuals against the original system."""
    residuals = design.b - design.A @ x
    return DenseParams(
        x=x,
        residuals=residuals,
        residual_norm=float(np.linalg.norm(residuals)),
        rhs_norm=float(np.linalg.norm(design.b)),
    )


def _check_residual(
    backend_name: str,
    design: SystemDesign,
    params: DenseParams,
) -> dict[str, Any]:
    """
    Compare the residual norm with the tolerance tier for this system.

    Systems whose condition number exceeds ILL_CONDITIONED_THRESHOLD are
    held to the looser ill-conditioned tier.

    Returns:
        Entries for Result.info: condition_number, tolerance_tier,
        residual_tolerance and residual_ok
    """
    condition_number = float(np.linalg.cond(design.A)) if design.n else 1.0
    tier = select_tolerance(
        backend_name,
        is_ill_conditioned=condition_number > ILL_CONDITIONED_THRESHOLD,
    )
    limit = tier.atol + tier.rtol * params.rhs_norm
    return {
        'condition_number': condition_number,
        'tolerance_tier': tier.name,
        'residual_tolerance': limit,
        'residual_ok': params.residual_norm <= limit,
    }


def _residual_warnings(params: DenseParams, check: dict[str, Any]) -> tuple[str, ...]:
    if check['residual_ok']:
        return ()
    return (
        f"residual norm {params.residual_norm:.3e} exceeds {check['tolerance_tier']} "
        f"tolerance {check['residual_tolerance']:.3e} "
        f"(condition number {check['condition_number']:.1e})",
    )


class CPUGaussBackend:
    """
    CPU backend using in-place Gaussian elimination with pivot repair.

    Implements the Backend protocol for SystemDesign -> DenseParams.
    """

    def __init__(self, pivot_tolerance: float = PIVOT_TOLERANCE):
        self._pivot_tolerance = pivot_tolerance

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: SystemDesign) -> Result[DenseParams]:
        """
        Solve A x = b by Gaussian elimination.

        Algorithm:
            1. Copy A (flat, row-major) and b into scratch buffers
            2. Forward elimination, repairing near-zero pivots
            3. Back substitution (scratch A becomes the identity)
            4. Residuals against the original system

        Raises:
            UnsolvableSystemError: If some column has no usable pivot
        """
        with timed() as timer:
            a = design.flat_matrix()
            x = design.rhs()
            system = LinearSystem(a, x, pivot_tolerance=self._pivot_tolerance)

            with timer.section('elimination'):
                system.gaussian_elimination(design.skip_first_n_rows)

            with timer.section('back_substitution'):
                system.back_substitution()

            with timer.section('residuals'):
                params = _build_params(design, x)
                check = _check_residual(self.name, design, params)

        repairs = system.pivot_repairs
        warnings = tuple(
            f"pivot repair in column {column}: row {source} subtracted from row {column}"
            for column, source in repairs
        ) + _residual_warnings(params, check)

        info: dict[str, Any] = {
            'method': 'gauss',
            'n': design.n,
            'skip_first_n_rows': design.skip_first_n_rows,
            'pivot_repairs': [list(r) for r in repairs],
            'pivot_tolerance': system.pivot_tolerance,
            **check,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


class CPULapackBackend:
    """
    CPU reference backend using LU decomposition with partial pivoting.

    The skip bound is recorded but has no effect: LAPACK always factors
    the full matrix.
    """

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def solve(self, design: SystemDesign) -> Result[DenseParams]:
        """
        Solve A x = b via scipy.linalg.solve.

        Raises:
            UnsolvableSystemError: If LAPACK reports an exactly singular matrix
        """
        from scipy.linalg import solve, LinAlgError

        with timed() as timer:
            with timer.section('lu_solve'):
                if design.n == 0:
                    x = np.empty(0, dtype=np.float64)
                else:
                    try:
                        x = solve(design.A, design.b)
                    except LinAlgError as e:
                        raise UnsolvableSystemError(
                            f"Can't resolve system: LAPACK LU failed ({e})",
                            n=design.n,
                        ) from e

            with timer.section('residuals'):
                params = _build_params(design, np.asarray(x, dtype=np.float64))
                check = _check_residual(self.name, design, params)

        info: dict[str, Any] = {
            'method': 'lu',
            'n': design.n,
            'skip_first_n_rows': design.skip_first_n_rows,
            'pivot_repairs': [],
            **check,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_residual_warnings(params, check),
        )
