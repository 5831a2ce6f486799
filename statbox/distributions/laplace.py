"""
Laplace (double exponential) distribution.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statbox.core.validation import check_array


def laplace_pdf(
    x: ArrayLike, mu: float = 0.0, beta: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """Laplace density exp(-|x - mu| / beta) / (2 beta)."""
    x = check_array(x, "x")
    return np.exp(-np.abs(x - mu) / beta) / (2.0 * beta)


def laplace_cdf(
    x: ArrayLike, mu: float = 0.0, beta: float = 1.0,
) -> NDArray[np.floating[Any]]:
    """Laplace cumulative distribution function."""
    x = check_array(x, "x")
    return (1.0 + np.sign(x - mu) * (1.0 - np.exp(-np.abs(x - mu) / beta))) / 2.0
