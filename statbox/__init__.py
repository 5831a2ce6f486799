"""
statbox: a statistics toolbox with MATLAB-compatible array semantics.

Probability-distribution functions that broadcast over "common size"
arguments and return NaN for invalid parameters instead of raising, plus
goodness-of-fit testing.

Submodules:
    distributions: Hypergeometric, Laplace and logistic distributions
    descriptive: Empirical CDF, NaN-ignoring extrema
    hypothesis: Single-sample Kolmogorov-Smirnov test
"""

__version__ = "0.1.0"

from statbox import distributions
from statbox import descriptive
from statbox import hypothesis
from statbox.distributions import hygepdf, hygecdf, hygeinv, hygernd
from statbox.hypothesis import kstest

__all__ = [
    "__version__",
    "distributions",
    "descriptive",
    "hypothesis",
    "hygepdf",
    "hygecdf",
    "hygeinv",
    "hygernd",
    "kstest",
]
