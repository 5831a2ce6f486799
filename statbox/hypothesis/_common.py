"""
Common types for hypothesis testing.

Defines KSTestParams (the kstest payload) and the valid tail names.
"""

from __future__ import annotations

from dataclasses import dataclass


VALID_TAILS = ("unequal", "larger", "smaller")


@dataclass(frozen=True)
class KSTestParams:
    """
    Parameter payload for the one-sample Kolmogorov-Smirnov test.

    Attributes
    ----------
    reject : bool
        True if the null hypothesis is rejected (p_value < alpha).
    p_value : float
        Asymptotic p-value.
    statistic : float
        K-S statistic for the requested tail: max|S - F|, max(S - F) or
        max(F - S).
    critical_value : float or None
        Approximate critical value, NaN outside the tabulated range of
        significance levels, None when not requested.
    alpha : float
        Significance level.
    tail : str
        "unequal", "larger", or "smaller".
    n : int
        Sample size after removing NaN.
    pvalue_method : str
        "tail_approximation", "matrix_power" (two-sided) or "smirnov"
        (one-sided).
    method : str
        Human-readable method name.
    data_name : str
        Description of the data.
    """
    reject: bool
    p_value: float
    statistic: float
    critical_value: float | None
    alpha: float
    tail: str
    n: int
    pvalue_method: str
    method: str
    data_name: str
