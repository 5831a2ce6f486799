"""
Null-hypothesis CDF specifications for goodness-of-fit tests.

A null CDF arrives as a callable, a distribution name, a two-column
numeric table, or nothing (standard normal). It is resolved exactly once
into one of two variants:

    CallableCdf(fn)  - evaluated directly at the observations
    TableCdf(x, y)   - read off or linearly interpolated at the observations

Downstream code only calls .evaluate() and never looks at the original
argument again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union
import numpy as np
from numpy.typing import NDArray

from statbox.core.exceptions import (
    ValidationError, DimensionError, InterpolationRangeError,
)
from statbox.core.validation import check_array
from statbox.distributions.registry import get_cdf


@dataclass(frozen=True)
class CallableCdf:
    """Null CDF given as a function F(x) -> [0, 1]."""
    fn: Callable[[NDArray], Any]
    name: str

    def evaluate(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        values = np.asarray(self.fn(x), dtype=np.float64)
        if values.shape != x.shape:
            values = values.reshape(-1)
            if values.shape != x.shape:
                raise DimensionError(
                    f"CDF: {self.name} returned {values.size} values "
                    f"for {x.size} observations",
                    shapes={"CDF": values.shape, "x": x.shape},
                )
        return values


@dataclass(frozen=True)
class TableCdf:
    """
    Null CDF given as tabulated (x, F(x)) pairs.

    x is strictly ascending and y non-decreasing; construct through
    resolve_null_cdf(), which sorts and consolidates the raw table.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]

    def evaluate(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        # tabulated exactly at the observations: no interpolation error
        if np.array_equal(x, self.x):
            return self.y.copy()

        if x[0] < self.x[0] or x[-1] > self.x[-1]:
            raise InterpolationRangeError(
                f"CDF: table spans [{self.x[0]:g}, {self.x[-1]:g}] but the "
                f"observations span [{x[0]:g}, {x[-1]:g}]; the table must "
                f"bound every observation",
                table_range=(float(self.x[0]), float(self.x[-1])),
                data_range=(float(x[0]), float(x[-1])),
            )
        return np.interp(x, self.x, self.y)


NullCdf = Union[CallableCdf, TableCdf]


def _table_cdf(table: Any, warnings_list: list[str]) -> TableCdf:
    """
    Validate, sort and de-duplicate a two-column numeric CDF table.

    Each run of equal x values keeps only its last row; the rows of a run
    carry the same F(x), so which one survives does not change the table.
    """
    arr = check_array(table, "CDF")
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise DimensionError(
            f"CDF: numerical CDF must have exactly 2 columns, got shape {arr.shape}",
            shapes={"CDF": arr.shape},
        )

    arr = arr[~np.isnan(arr.sum(axis=1))].astype(np.float64)
    if arr.shape[0] == 0:
        raise ValidationError("CDF: numerical CDF must have at least one row")

    order = np.argsort(arr[:, 0], kind="stable")
    x_cdf = arr[order, 0]
    y_cdf = arr[order, 1]

    y_diff = np.diff(y_cdf)
    if np.any(y_diff < 0):
        raise ValidationError("CDF: non-incrementing numerical CDF")

    dup = np.flatnonzero(np.diff(x_cdf) == 0)
    if dup.size > 0:
        if not np.all(y_diff[dup] == 0):
            raise ValidationError(
                "CDF: duplicate x values in numerical CDF have different F(x)"
            )
        x_cdf = np.delete(x_cdf, dup)
        y_cdf = np.delete(y_cdf, dup)
        warnings_list.append(
            f"{dup.size} duplicate row(s) consolidated in numerical CDF"
        )

    return TableCdf(x=x_cdf, y=y_cdf)


def resolve_null_cdf(cdf: Any, warnings_list: list[str]) -> NullCdf:
    """
    Resolve a user-supplied CDF specification into a NullCdf variant.

    Parameters
    ----------
    cdf : callable, str, array-like, or None
        None selects the standard normal CDF.
    warnings_list : list of str
        Collects non-fatal notes (e.g. consolidated duplicate rows).

    Raises
    ------
    ValidationError
        Unknown distribution name, malformed table, decreasing table,
        inconsistent duplicates.
    """
    if cdf is None:
        return CallableCdf(fn=get_cdf("normcdf"), name="normcdf")
    if isinstance(cdf, str):
        return CallableCdf(fn=get_cdf(cdf), name=cdf)
    if callable(cdf):
        return CallableCdf(fn=cdf, name=getattr(cdf, "__name__", "CDF"))
    return _table_cdf(cdf, warnings_list)
