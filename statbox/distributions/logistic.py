"""
Logistic distribution.

The CDF and inverse use scipy.special.expit / logit, which stay accurate
in both tails.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import expit, logit

from statbox.core.validation import check_array


def logistic_pdf(
    x: ArrayLike, mu: float = 0.0, scale: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """Logistic density."""
    x = check_array(x, "x")
    z = (x - mu) / scale
    # symmetric in z; using -|z| keeps exp() from overflowing
    e = np.exp(-np.abs(z))
    return e / (scale * (1.0 + e) ** 2)


def logistic_cdf(
    x: ArrayLike, mu: float = 0.0, scale: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """Logistic cumulative distribution function 1 / (1 + exp(-(x - mu) / scale))."""
    x = check_array(x, "x")
    return expit((x - mu) / scale)


def logistic_inv(
    x: ArrayLike, mu: float = 0.0, scale: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """
    Logistic quantile function.

    Parameters
    ----------
    x : array-like
        Probabilities.
    mu : float
        Location.
    scale : float
        Scale.

    Returns
    -------
    NDArray
        -Inf at 0, Inf at 1, mu + scale * log(x / (1 - x)) inside (0, 1),
        NaN elsewhere (including NaN input).
    """
    x = check_array(x, "x")
    inv = np.full(x.shape, np.nan, dtype=x.dtype)

    inv[x == 0] = -np.inf
    inv[x == 1] = np.inf

    k = (x > 0) & (x < 1)
    inv[k] = mu + scale * logit(x[k])
    return inv
