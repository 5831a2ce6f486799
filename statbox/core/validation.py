"""
Input validation utilities for statbox.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

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

from statbox.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a real floating point numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    check_real(result, name)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_real(array: NDArray, name: str) -> None:
    """
    Verify array is not complex.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has a complex dtype
    """
    if np.iscomplexobj(array):
        raise ValidationError(f"{name}: must not be complex")


def check_vector(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Verify array is a vector and return it flattened.

    Row vectors (1, n), column vectors (n, 1) and plain 1D arrays are all
    accepted; anything with more than one non-singleton axis is rejected.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Returns:
        1D view of the data

    Raises:
        DimensionError: If array is not a vector
    """
    non_singleton = [d for d in array.shape if d != 1]
    if len(non_singleton) > 1:
        raise DimensionError(
            f"{name}: must be a vector, got shape {array.shape}",
            shapes={name: array.shape},
        )
    return array.ravel()


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a single real number and return it as float.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not a real numeric scalar
    """
    if isinstance(value, (bool, np.bool_)) or isinstance(value, str):
        raise ValidationError(
            f"{name}: must be a numeric scalar, got {type(value).__name__}"
        )
    if isinstance(value, numbers.Real):
        return float(value)
    arr = np.asarray(value) if not isinstance(value, numbers.Number) else None
    if arr is not None and arr.size == 1 and np.issubdtype(arr.dtype, np.number) \
            and not np.iscomplexobj(arr):
        return float(arr.reshape(()))
    raise ValidationError(
        f"{name}: must be a numeric scalar, got {value!r}"
    )


def check_probability_open(value: Any, name: str) -> float:
    """
    Verify value is a numeric scalar strictly inside (0, 1).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not numeric, is NaN, or lies outside (0, 1)
    """
    v = check_scalar(value, name)
    if np.isnan(v) or not (0.0 < v < 1.0):
        raise ValidationError(
            f"{name}: must be a numeric scalar in the range (0, 1), got {v}"
        )
    return v


def check_nonnegative_integer(value: Any, name: str) -> int:
    """
    Verify value is a non-negative whole number.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is negative or fractional
    """
    v = check_scalar(value, name)
    if not np.isfinite(v) or v < 0 or v != np.floor(v):
        raise ValidationError(
            f"{name}: must be a non-negative integer, got {value!r}"
        )
    return int(v)


def common_size(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...],
) -> tuple[tuple[int, ...], list[NDArray[np.floating[Any]]]]:
    """
    Reconcile scalar-or-array arguments to one common shape.

    Every argument must either hold a single element or share the exact
    shape of every other non-scalar argument. Scalars are expanded to that
    shape.

    Args:
        *arrays: Arrays to reconcile
        names: Parameter names for error messages (must match number of arrays)

    Returns:
        (shape, expanded arrays) where each expanded array has `shape`

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If two non-scalar arguments disagree in shape
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    shape: tuple[int, ...] | None = None
    for arr in arrays:
        if arr.size != 1:
            if shape is None:
                shape = arr.shape
            elif arr.shape != shape:
                details = {n: a.shape for n, a in zip(names, arrays)}
                listing = ", ".join(f"{n}={s}" for n, s in details.items())
                raise DimensionError(
                    f"{', '.join(names)} must be of common size or scalars ({listing})",
                    shapes=details,
                )

    if shape is None:
        shape = max((arr.shape for arr in arrays), key=len)

    expanded = [
        np.full(shape, arr.reshape(-1)[0], dtype=arr.dtype) if arr.size == 1
        else arr.copy()
        for arr in arrays
    ]
    return shape, expanded
