"""
Empirical cumulative distribution function.

The ECDF of a sample is the right-continuous step function
S(x) = (# observations <= x) / n. For goodness-of-fit work the value on
both sides of every jump matters, so the result carries S just before
(S(x-)) and just after (S(x+)) each distinct observation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statbox.core.exceptions import ValidationError
from statbox.core.validation import check_array, check_vector


@dataclass(frozen=True)
class ECDF:
    """
    Step-function representation of a sample.

    Attributes
    ----------
    x : NDArray
        Distinct observations, strictly ascending.
    before : NDArray
        S(x-) at each distinct observation.
    after : NDArray
        S(x+) at each distinct observation.
    n : int
        Number of non-missing observations.
    """
    x: NDArray[np.floating[Any]]
    before: NDArray[np.floating[Any]]
    after: NDArray[np.floating[Any]]
    n: int

    def __call__(self, points: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate S at arbitrary points."""
        pts = np.asarray(points, dtype=np.float64)
        idx = np.searchsorted(self.x, pts, side="right")
        values = np.concatenate([[0.0], self.after])
        return values[idx]


def ecdf(x: ArrayLike) -> ECDF:
    """
    Build the empirical CDF of a sample.

    Parameters
    ----------
    x : array-like
        Real vector. NaN entries are treated as missing and dropped.

    Returns
    -------
    ECDF

    Raises
    ------
    ValidationError
        If x is complex, non-numeric, or has no non-missing values.
    DimensionError
        If x is not a vector.
    """
    arr = check_vector(check_array(x, "x"), "x").astype(np.float64)
    arr = arr[~np.isnan(arr)]
    n = len(arr)
    if n == 0:
        raise ValidationError(
            "x: no non-missing observations (all values are NaN or x is empty)"
        )

    values, counts = np.unique(arr, return_counts=True)
    after = np.cumsum(counts) / n
    before = np.concatenate([[0.0], after[:-1]])
    return ECDF(x=values, before=before, after=after, n=n)
