"""
Exception hierarchy for pylinsys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when caller-provided buffers or parameters fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Buffer lengths are incorrect or inconsistent.

    Raised when the matrix buffer does not hold exactly n*n values for a
    right-hand side of length n, or when an array has the wrong shape.
    """
    pass


class NumericalError(PyLinSysError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class UnsolvableSystemError(NumericalError):
    """
    No usable pivot exists for some column.

    Raised during forward elimination when the diagonal entry of a column
    and every entry below it are numerically zero. The buffers are left in
    a partially eliminated state; no operation is rolled back.

    Attributes:
        column: Pivot column that could not be repaired
        n: Dimension of the system
        pivot_tolerance: Magnitude at or below which a pivot is unusable
    """

    def __init__(
        self,
        message: str,
        column: int | None = None,
        n: int | None = None,
        pivot_tolerance: float | None = None
    ):
        super().__init__(message)
        self.column = column
        self.n = n
        self.pivot_tolerance = pivot_tolerance
