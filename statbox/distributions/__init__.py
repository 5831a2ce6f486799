"""
Probability distributions module.

Element-wise PDF/CDF/inverse/random functions following MATLAB's
"common size" broadcasting: every argument is a scalar or an array of one
shared shape.

Public API:
    hygepdf(x, t, m, n)      - Hypergeometric density ("vectorexpand" mode)
    hygecdf(x, t, m, n)      - Hypergeometric CDF
    hygeinv(p, t, m, n)      - Hypergeometric quantile
    hygernd(t, m, n, ...)    - Hypergeometric random variates
    laplace_pdf / laplace_cdf
    logistic_pdf / logistic_cdf / logistic_inv
    get_cdf(name)            - Named CDF lookup
"""

from statbox.distributions.hypergeometric import (
    hygepdf, hygecdf, hygeinv, hygernd,
)
from statbox.distributions.laplace import laplace_pdf, laplace_cdf
from statbox.distributions.logistic import (
    logistic_pdf, logistic_cdf, logistic_inv,
)
from statbox.distributions.registry import get_cdf, available_cdfs

__all__ = [
    "hygepdf",
    "hygecdf",
    "hygeinv",
    "hygernd",
    "laplace_pdf",
    "laplace_cdf",
    "logistic_pdf",
    "logistic_cdf",
    "logistic_inv",
    "get_cdf",
    "available_cdfs",
]
