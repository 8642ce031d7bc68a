"""
In-place Gaussian elimination on flat, caller-owned buffers.

The matrix is a flat float64 buffer of n*n values where element
(row y, column x) lives at index x + y*n; the right-hand side is a flat
buffer of n values. Solving overwrites the matrix with the identity and
the right-hand side with the solution. Nothing is allocated beyond a
reshaped view of the matrix buffer.

The solver borrows both buffers for the duration of the call. Callers
must not read or write them from elsewhere until solve() returns
(single-writer discipline; there is no locking).
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.exceptions import UnsolvableSystemError
from pylinsys.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsys.core.validation import (
    check_float64_buffer,
    check_system_lengths,
    check_no_shared_memory,
    check_non_negative_int,
    check_positive_float,
)


@dataclass(frozen=True)
class GaussResult:
    """
    Bookkeeping from an in-place Gaussian solve.

    Attributes:
        n: Dimension of the system
        skip_first_n_rows: Elimination lower bound that was used
        pivot_repairs: (column, source_row) pairs, one per repaired pivot
    """
    n: int
    skip_first_n_rows: int
    pivot_repairs: tuple[tuple[int, int], ...]


class LinearSystem:
    """
    Dense linear system bound to caller-owned matrix and vector buffers.

    Usage:
        a = assemble_stiffness().ravel()   # n*n values, row-major
        b = assemble_loads()               # n values
        LinearSystem(a, b).solve()
        # b now holds the solution, a the identity

    Args:
        a: Flat matrix buffer (writeable, contiguous float64, length n*n)
        b: Right-hand side buffer (writeable, contiguous float64, length n)
        pivot_tolerance: Pivots with magnitude at or below this value are
            repaired before use

    Raises:
        ValidationError: If a buffer cannot be mutated in place or the
            buffers alias each other
        DimensionError: If len(a) != len(b) ** 2
    """

    def __init__(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
        *,
        pivot_tolerance: float = PIVOT_TOLERANCE,
    ):
        check_float64_buffer(a, 'matrix')
        check_float64_buffer(b, 'vector')
        check_system_lengths(a.shape[0], b.shape[0])
        check_no_shared_memory(a, b, names=('matrix', 'vector'))

        self._b = b
        self._n = b.shape[0]
        # View, not a copy: a is contiguous so writes land in the caller's buffer
        self._rows = a.reshape(self._n, self._n)
        self._pivot_tolerance = check_positive_float(pivot_tolerance, 'pivot_tolerance')
        self._pivot_repairs: list[tuple[int, int]] = []

    @property
    def n(self) -> int:
        return self._n

    @property
    def pivot_tolerance(self) -> float:
        return self._pivot_tolerance

    @property
    def pivot_repairs(self) -> tuple[tuple[int, int], ...]:
        """(column, source_row) for every pivot fixed up so far."""
        return tuple(self._pivot_repairs)

    def solve(self, skip_first_n_rows: int = 0) -> None:
        """
        Solve the system in place.

        Args:
            skip_first_n_rows: Rows above this index are treated as already
                eliminated and never receive row subtractions. 0 eliminates
                every row.

        Raises:
            ValidationError: If skip_first_n_rows is not a non-negative int
            UnsolvableSystemError: If some column has no usable pivot. The
                buffers are left partially eliminated.
        """
        self.gaussian_elimination(skip_first_n_rows)
        self.back_substitution()

    def gaussian_elimination(self, skip_first_n_rows: int = 0) -> None:
        """
        Forward elimination: zero every entry below the diagonal.

        The skip bound changes which rows receive the subtraction, never
        which column is pivoted on.
        """
        skip = check_non_negative_int(skip_first_n_rows, 'skip_first_n_rows')
        n = self._n
        if n == 0:
            return

        for x in range(n - 1):
            pivot = self._gaussian_pivot(x)
            for y in range(max(skip, x + 1), n):
                weight = self._rows[y, x] / pivot
                self._weighted_subtraction(y, x, weight)

        # Nothing below the last diagonal entry to repair it from, so this
        # only raises if it is unusable.
        self._gaussian_pivot(n - 1)

    def _gaussian_pivot(self, x: int) -> float:
        """
        Return a usable pivot for column x, repairing row x if needed.

        An unusable diagonal entry is fixed by subtracting the first row
        below it whose entry in column x is usable.
        """
        pivot = self._rows[x, x]
        # Magnitude guard: tiny pivots of either sign are repaired, large ones
        # are used as is. The reading `pivot < -1e11 or 1e11 > pivot` would
        # instead divide by 1e-13 directly and "repair" only huge pivots.
        if abs(pivot) > self._pivot_tolerance:
            return pivot

        y = x + 1
        while y < self._n and abs(self._rows[y, x]) <= self._pivot_tolerance:
            y += 1
        if y >= self._n:
            raise UnsolvableSystemError(
                f"Can't resolve system: no pivot in column {x} exceeds "
                f"{self._pivot_tolerance:.1e} in magnitude (n={self._n})",
                column=x,
                n=self._n,
                pivot_tolerance=self._pivot_tolerance,
            )

        self._subtract_rows(x, y)
        self._pivot_repairs.append((x, y))
        return self._rows[x, x]

    def back_substitution(self) -> None:
        """
        Normalize each pivot row and clear the entries above it.

        Walks columns from last to first. Assumes elimination has run, so
        the matrix is upper triangular with a usable diagonal.
        """
        rows, b = self._rows, self._b
        for x in reversed(range(self._n)):
            b[x] /= rows[x, x]
            rows[x, x] = 1.0

            b[:x] -= rows[:x, x] * b[x]
            rows[:x, x] = 0.0

    def _weighted_subtraction(self, dst_row: int, src_row: int, weight: float) -> None:
        self._rows[dst_row] -= self._rows[src_row] * weight
        self._b[dst_row] -= self._b[src_row] * weight

    def _subtract_rows(self, dst_row: int, src_row: int) -> None:
        self._rows[dst_row] -= self._rows[src_row]
        self._b[dst_row] -= self._b[src_row]


def gauss_solve_inplace(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    skip_first_n_rows: int = 0,
    *,
    pivot_tolerance: float = PIVOT_TOLERANCE,
) -> GaussResult:
    """
    Solve A·x = b in place by Gaussian elimination.

    Functional wrapper around LinearSystem. On return b holds x and a holds
    the identity.

    Args:
        a: Flat row-major matrix buffer (n*n float64 values)
        b: Right-hand side buffer (n float64 values)
        skip_first_n_rows: Rows above this index are assumed already eliminated
        pivot_tolerance: Pivot magnitude at or below which repair kicks in

    Returns:
        GaussResult with the pivot repairs that were applied

    Raises:
        DimensionError: If len(a) != len(b) ** 2
        ValidationError: If a buffer cannot be mutated in place
        UnsolvableSystemError: If some column has no usable pivot
    """
    system = LinearSystem(a, b, pivot_tolerance=pivot_tolerance)
    system.solve(skip_first_n_rows)
    return GaussResult(
        n=system.n,
        skip_first_n_rows=skip_first_n_rows,
        pivot_repairs=system.pivot_repairs,
    )
