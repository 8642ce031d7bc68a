"""
Dense system design.

Design holds a validated, private copy of a linear system (A, b) plus the
elimination skip bound. Backends solve against the design; the caller's
arrays are never touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_ndim,
    check_square,
    check_system_lengths,
    check_non_negative_int,
)


@dataclass(frozen=True)
class SystemDesign:
    """
    Dense linear system specification.

    Immutable after construction. The matrix is stored as n x n, the
    right-hand side as (n,).

    Construction:
        SystemDesign.from_arrays(A, b)                       # A is n x n
        SystemDesign.from_arrays(A.ravel(), b)               # flat row-major A
        SystemDesign.from_arrays(A, b, skip_first_n_rows=3)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int
    _skip_first_n_rows: int = 0

    @classmethod
    def from_arrays(
        cls,
        A: ArrayLike,
        b: ArrayLike,
        *,
        skip_first_n_rows: int = 0,
    ) -> SystemDesign:
        """
        Build a design from array-likes.

        Args:
            A: Matrix, either n x n or flat with n*n values in row-major order
            b: Right-hand side (n,). An (n, 1) column is accepted.
            skip_first_n_rows: Elimination lower bound (0 eliminates every row)

        Raises:
            ValidationError: If inputs are non-numeric or non-finite
            DimensionError: If shapes are inconsistent
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        return cls.build(A_arr, b_arr, skip_first_n_rows=skip_first_n_rows)

    @classmethod
    def build(
        cls,
        A: NDArray,
        b: NDArray,
        *,
        skip_first_n_rows: int = 0,
    ) -> SystemDesign:
        """Internal builder with validation. Always copies."""
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()
        check_1d(b, 'b')
        n = b.shape[0]

        if A.ndim == 1:
            check_system_lengths(A.shape[0], n)
            A = A.reshape(n, n)
        else:
            check_ndim(A, 2, 'A')
            check_square(A, 'A')
            check_system_lengths(A.size, n)

        check_finite(A, 'A')
        check_finite(b, 'b')
        skip = check_non_negative_int(skip_first_n_rows, 'skip_first_n_rows')

        return cls(
            _A=np.array(A, dtype=np.float64, order='C'),
            _b=np.array(b, dtype=np.float64),
            _n=n,
            _skip_first_n_rows=skip,
        )

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """Number of unknowns."""
        return self._n

    @property
    def skip_first_n_rows(self) -> int:
        return self._skip_first_n_rows

    def flat_matrix(self) -> NDArray[np.floating[Any]]:
        """Fresh row-major flat copy of A, safe to solve in place."""
        return self._A.ravel().copy()

    def rhs(self) -> NDArray[np.floating[Any]]:
        """Fresh copy of b, safe to solve in place."""
        return self._b.copy()
