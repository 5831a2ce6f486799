"""
Named cumulative distribution functions.

Maps distribution names (MATLAB-style "normcdf", R-style "pnorm" and bare
"norm") to callables F(x) -> [0, 1] so that hypothesis tests can accept a
distribution by name. Every registered CDF is the standard member of its
family.
"""

from __future__ import annotations

from typing import Callable
import numpy as np
from scipy import stats as sp_stats

from statbox.core.exceptions import ValidationError
from statbox.distributions.laplace import laplace_cdf
from statbox.distributions.logistic import logistic_cdf


CdfFunction = Callable[[np.ndarray], np.ndarray]


def _normcdf(x: np.ndarray) -> np.ndarray:
    return sp_stats.norm.cdf(x, loc=0.0, scale=1.0)


def _unifcdf(x: np.ndarray) -> np.ndarray:
    return sp_stats.uniform.cdf(x, loc=0.0, scale=1.0)


def _expcdf(x: np.ndarray) -> np.ndarray:
    return sp_stats.expon.cdf(x, scale=1.0)


_NAMED_CDFS: dict[str, CdfFunction] = {
    "normcdf": _normcdf,
    "norm": _normcdf,
    "pnorm": _normcdf,
    "unifcdf": _unifcdf,
    "unif": _unifcdf,
    "punif": _unifcdf,
    "expcdf": _expcdf,
    "exp": _expcdf,
    "pexp": _expcdf,
    "laplace_cdf": laplace_cdf,
    "logistic_cdf": logistic_cdf,
}


def available_cdfs() -> tuple[str, ...]:
    """Names accepted by get_cdf()."""
    return tuple(_NAMED_CDFS)


def get_cdf(name: str) -> CdfFunction:
    """
    Look up a CDF by name (case-insensitive).

    Raises
    ------
    ValidationError
        If the name is not registered.
    """
    key = name.lower()
    if key not in _NAMED_CDFS:
        raise ValidationError(
            f"Unknown distribution: {name!r}. "
            f"Supported: {list(_NAMED_CDFS.keys())}"
        )
    return _NAMED_CDFS[key]
