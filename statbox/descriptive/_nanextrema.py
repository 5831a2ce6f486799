"""
NaN-ignoring maximum and minimum.

Reductions run along MATLAB's default dimension (the first axis whose
length is not 1) unless an axis is given. A slice made only of NaN
reduces to NaN.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statbox.core.validation import check_array


def _default_axis(x: NDArray) -> int:
    for axis, length in enumerate(x.shape):
        if length != 1:
            return axis
    return 0


def _reduce(
    x: NDArray, axis: int | None, fill: float, arg: Any,
) -> tuple[NDArray, NDArray]:
    if x.ndim == 0:
        x = x.reshape(1)
    if axis is None:
        axis = _default_axis(x)
    nanvals = np.isnan(x)
    filled = np.where(nanvals, fill, x)
    idx = arg(filled, axis=axis)
    values = np.take_along_axis(
        filled, np.expand_dims(idx, axis), axis=axis,
    ).squeeze(axis)
    values[np.all(nanvals, axis=axis)] = np.nan
    return values, idx


def _pairwise(x: NDArray, y: NDArray, pick: Any, fill: float) -> NDArray:
    x, y = np.broadcast_arrays(x, y)
    x_nan, y_nan = np.isnan(x), np.isnan(y)
    v = np.asarray(pick(np.where(x_nan, fill, x), np.where(y_nan, fill, y)))
    v[x_nan & y_nan] = np.nan
    return v


def nanmax(
    x: ArrayLike,
    y: ArrayLike | None = None,
    axis: int | None = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.intp]] | NDArray[np.floating[Any]]:
    """
    Maximum ignoring NaN.

    With a single array, returns (values, indices) of the maxima along
    `axis`. With two arrays, returns their element-wise maximum, NaN only
    where both are NaN.
    """
    x_arr = check_array(x, "x")
    if y is not None:
        return _pairwise(x_arr, check_array(y, "y"), np.maximum, -np.inf)
    return _reduce(x_arr, axis, -np.inf, np.argmax)


def nanmin(
    x: ArrayLike,
    y: ArrayLike | None = None,
    axis: int | None = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.intp]] | NDArray[np.floating[Any]]:
    """
    Minimum ignoring NaN.

    With a single array, returns (values, indices) of the minima along
    `axis`. With two arrays, returns their element-wise minimum, NaN only
    where both are NaN.
    """
    x_arr = check_array(x, "x")
    if y is not None:
        return _pairwise(x_arr, check_array(y, "y"), np.minimum, np.inf)
    return _reduce(x_arr, axis, np.inf, np.argmin)
