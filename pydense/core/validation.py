"""
Input validation utilities for PyDense.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Shape checks take anything exposing a ``shape`` tuple, so they work on
NumPy arrays as well as pydense Matrix and Vector objects.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pydense.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

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

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    # Storage is always double precision
    if result.dtype != np.float64:
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

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_same_shape(a: Any, b: Any, names: tuple[str, str]) -> None:
    """
    Verify two objects have identical shapes.

    Args:
        a: First object (anything with a ``shape`` attribute)
        b: Second object
        names: Parameter names for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if tuple(a.shape) != tuple(b.shape):
        raise DimensionError(
            f"Shape mismatch: {names[0]} has shape {tuple(a.shape)}, "
            f"{names[1]} has shape {tuple(b.shape)}"
        )


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a vector length matches the dimension it is paired with.

    Args:
        length: Actual length
        expected: Required length
        name: Parameter name for error messages

    Raises:
        DimensionError: If the lengths differ
    """
    if length != expected:
        raise DimensionError(
            f"{name}: expected length {expected}, got {length}"
        )


def check_index(index: int, bound: int, name: str) -> int:
    """
    Verify a 0-based index lies in ``[0, bound)``.

    Args:
        index: Index to check
        bound: Exclusive upper bound (the dimension size)
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside the range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: index must be an integer, got {type(index).__name__}"
        )
    index = int(index)
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range for dimension of size {bound}",
            index=index,
            shape=(bound,),
        )
    return index


def check_block_size(k: int, bound: int, name: str) -> int:
    """
    Verify a block size or split point lies in ``[0, bound]``.

    Args:
        k: Block size to check
        bound: Inclusive upper bound
        name: Parameter name for error messages

    Returns:
        k as a plain int

    Raises:
        ValidationError: If k is not an integer or is outside the range
    """
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, (int, np.integer)):
        raise ValidationError(
            f"{name}: must be an integer, got {type(k).__name__}"
        )
    k = int(k)
    if not 0 <= k <= bound:
        raise ValidationError(f"{name}: must satisfy 0 <= {name} <= {bound}, got {k}")
    return k


def check_out_shape(out: Any, shape: tuple[int, ...], name: str = 'out') -> None:
    """
    Verify a caller-supplied output buffer is sized exactly for the result.

    Args:
        out: Output object (anything with a ``shape`` attribute)
        shape: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If out does not have exactly the required shape
    """
    if tuple(out.shape) != tuple(shape):
        raise DimensionError(
            f"{name}: expected shape {tuple(shape)}, got {tuple(out.shape)}"
        )


def check_dimension(value: int, name: str) -> int:
    """
    Verify a matrix/vector dimension is a non-negative integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        value as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_tolerance(value: float, name: str) -> float:
    """
    Verify a tolerance is a finite, non-negative real number.

    Raises:
        ValidationError: If value is not a real number, is NaN/Inf, or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ValidationError(f"{name}: must be a real number, got {type(value).__name__}")
    value = float(value)
    if not np.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value
