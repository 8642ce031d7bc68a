"""
Input validation utilities for pylinsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent. None of them mutates its input.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsys.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If array is not 2D or has unequal dimensions
    """
    check_ndim(array, 2, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(f"{name}: expected square matrix, got shape {array.shape}")


def check_system_lengths(matrix_length: int, vector_length: int) -> None:
    """
    Verify a flat matrix buffer matches its right-hand side.

    A system with a right-hand side of length n needs exactly n*n matrix
    entries.

    Args:
        matrix_length: Number of values in the flat matrix buffer
        vector_length: Number of values in the right-hand side

    Raises:
        DimensionError: If matrix_length != vector_length ** 2
    """
    expected = vector_length * vector_length
    if matrix_length != expected:
        raise DimensionError(
            f"matrix: expected {expected} values for a right-hand side of length "
            f"{vector_length}, got {matrix_length}"
        )


def check_float64_buffer(array: Any, name: str) -> None:
    """
    Verify array can be mutated in place as a flat float64 buffer.

    In-place solving writes through the caller's array, so anything that
    would force a copy (lists, other dtypes, strided views, read-only
    arrays) is rejected instead of converted.

    Raises:
        ValidationError: If array is not a writeable, C-contiguous float64 ndarray
        DimensionError: If array is not 1D
    """
    if not isinstance(array, np.ndarray):
        raise ValidationError(
            f"{name}: expected numpy.ndarray buffer, got {type(array).__name__}"
        )
    if array.dtype != np.float64:
        raise ValidationError(f"{name}: expected float64 buffer, got {array.dtype}")
    check_1d(array, name)
    if not array.flags.c_contiguous:
        raise ValidationError(f"{name}: buffer must be contiguous")
    if not array.flags.writeable:
        raise ValidationError(f"{name}: buffer is read-only")


def check_no_shared_memory(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify two buffers do not alias each other.

    Raises:
        ValidationError: If a and b overlap in memory
    """
    if np.shares_memory(a, b):
        raise ValidationError(f"{names[0]} and {names[1]} share memory")


def check_non_negative_int(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer (bool is rejected).

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_positive_float(value: Any, name: str) -> float:
    """
    Verify value is a finite, strictly positive real number.

    Raises:
        ValidationError: If value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected real number, got {type(value).__name__}")
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be positive and finite, got {value}")
    return float(value)
