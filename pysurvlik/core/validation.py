"""
Input validation utilities for pysurvlik.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

They run once, when an observation scheme is built. Likelihood evaluation
trusts the validated arrays and never calls back into this module.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pysurvlik.core.exceptions import DimensionError, EntryTimeError, ValidationError
from pysurvlik.core.precision import SUPPORTED_DTYPES


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    float32 and float64 inputs keep their dtype and are not copied; other
    numeric inputs are promoted to float64.

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

    # Reject non-numeric dtypes (strings, bytes, booleans, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.dtype not in SUPPORTED_DTYPES:
        result = result.astype(np.float64)

    return result


def check_records(
    values: ArrayLike,
    dtype: DTypeLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert ingested record values to an array of the requested float dtype.

    Runs check_array first, so missing values (None) and text are reported
    as ValidationError instead of becoming NaN or a bare ValueError.

    Args:
        values: Collected record values
        dtype: Target float dtype
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype

    Raises:
        ValidationError: If values cannot be converted to numeric array
    """
    return check_array(values, name).astype(dtype, copy=False)


def check_float_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Resolve a dtype argument and verify it is a supported float type.

    Args:
        dtype: Anything np.dtype() accepts
        name: Parameter name for error messages

    Returns:
        The resolved numpy dtype

    Raises:
        ValidationError: If dtype is not float32 or float64
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {dtype!r}") from e

    if resolved not in SUPPORTED_DTYPES:
        supported = ", ".join(str(d) for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"{name}: unsupported dtype {resolved}, expected one of {supported}"
        )
    return resolved


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


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_entry_times(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify left-truncation entry times are strictly greater than zero.

    NaN compares false against zero and is therefore not rejected here;
    combine with check_finite when NaN must be excluded.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        EntryTimeError: If any element is <= 0
    """
    invalid = array <= 0
    if np.any(invalid):
        n_invalid = int(np.sum(invalid))
        min_value = float(np.min(array[invalid]))
        raise EntryTimeError(
            f"{name}: {n_invalid} value(s) <= 0 (min {min_value}), "
            f"expected strictly positive values",
            n_invalid=n_invalid,
            min_value=min_value,
        )


def read_only(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Return a read-only view of array.

    The caller's array keeps its own flags; only the view is locked, so a
    scheme can borrow caller data without copying and without exposing a
    mutable handle.
    """
    view = array.view()
    view.flags.writeable = False
    return view
