"""
Hypothesis testing module.

Public API:
    kstest(x, ...)       - Single-sample Kolmogorov-Smirnov test
"""

from statbox.hypothesis.solvers import kstest
from statbox.hypothesis.design import KSTestDesign
from statbox.hypothesis._common import KSTestParams
from statbox.hypothesis._null_cdf import CallableCdf, TableCdf, NullCdf
from statbox.hypothesis.solution import KSTestSolution

__all__ = [
    "kstest",
    "KSTestDesign",
    "KSTestParams",
    "KSTestSolution",
    "CallableCdf",
    "TableCdf",
    "NullCdf",
]
