"""
Descriptive statistics module.

Public API:
    ecdf(x)            - Empirical CDF with values on both sides of each jump
    nanmax(x[, y])     - Maximum ignoring NaN
    nanmin(x[, y])     - Minimum ignoring NaN
"""

from statbox.descriptive._ecdf import ECDF, ecdf
from statbox.descriptive._nanextrema import nanmax, nanmin

__all__ = [
    "ECDF",
    "ecdf",
    "nanmax",
    "nanmin",
]
