"""
Tolerance tiers for pivot safety and solution verification.

Defines:
- the pivot threshold used by Gaussian elimination to decide when a
  diagonal entry is too close to zero to divide by
- precision expectations for the residual check run after each solve

Used by the elimination kernel, the dense front end, and the test suite.
"""

from dataclasses import dataclass


# A pivot with magnitude at or below this value triggers pivot repair.
# The guard compares magnitude: abs(pivot) > PIVOT_TOLERANCE means usable.
# (A test of the form `pivot < -1e11 || 1e11 > pivot` accepts every
# ordinary pivot and never repairs; the 9x9 reference system solves
# identically under either reading since its smallest pivot is 1e-3.)
PIVOT_TOLERANCE = 1e-11

# Condition number above which residuals are checked against the
# ill-conditioned tier
ILL_CONDITIONED_THRESHOLD = 1e6


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Direct elimination in double precision on well-scaled systems
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, A @ x reproduces b',
)

# Double precision, ill-conditioned systems (cond > 1e6)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e6)',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if not backend_name.startswith('cpu'):
        raise ValueError(f"No tolerance tier for backend {backend_name!r}")
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
