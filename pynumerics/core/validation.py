"""
Input validation utilities for PyNumerics.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pynumerics.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types,
    ragged nesting or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

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

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

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


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(data: Any, name: str) -> None:
    """
    Verify nested row data is non-empty and rectangular.

    numpy arrays are rectangular by construction and only need a non-empty
    shape; nested sequences are checked row by row so that ragged input
    is reported with the offending row index.

    Args:
        data: 2D numpy array or sequence of row sequences
        name: Parameter name for error messages

    Raises:
        DimensionError: If there are no rows, a row is empty, or rows
            have unequal lengths
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise DimensionError(
                f"{name}: expected 2D array, got {data.ndim}D with shape {data.shape}"
            )
        if data.shape[0] < 1:
            raise DimensionError(f"{name}: must have at least one row")
        if data.shape[1] < 1:
            raise DimensionError(f"{name}: must have at least one column")
        return

    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise DimensionError(
            f"{name}: expected a sequence of rows, got {type(data).__name__}"
        )
    if len(data) == 0:
        raise DimensionError(f"{name}: must have at least one row")

    expected = None
    for i, row in enumerate(data):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise DimensionError(
                f"{name}: row {i} is {type(row).__name__}, expected a sequence"
            )
        if len(row) == 0:
            raise DimensionError(f"{name}: row {i} is empty")
        if expected is None:
            expected = len(row)
        elif len(row) != expected:
            raise DimensionError(
                f"{name}: all rows must have the same number of columns "
                f"(row 0 has {expected}, row {i} has {len(row)})"
            )


def check_index(index: int, size: int, name: str) -> None:
    """
    Verify an integer index lies in [0, size).

    Raises:
        ValidationError: If index is not an integer or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(index).__name__}"
        )
    if not 0 <= index < size:
        raise ValidationError(
            f"{name}: index {index} out of range for size {size}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_positive_size(value: int, name: str) -> None:
    """
    Verify a matrix dimension is a positive integer.

    Raises:
        ValidationError: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
