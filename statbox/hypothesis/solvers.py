"""
Solver dispatch for hypothesis tests.

Provides kstest(), the single-sample Kolmogorov-Smirnov goodness-of-fit
test. Options may be given as keyword arguments or as MATLAB-style
name/value pairs:

    kstest(x, alpha=0.01, tail="larger")
    kstest(x, "Tail", "larger", "alpha", 0.01)
"""

from __future__ import annotations

from typing import Any, Literal
from numpy.typing import ArrayLike

from statbox.core.exceptions import ValidationError
from statbox.hypothesis.design import KSTestDesign
from statbox.hypothesis.solution import KSTestSolution
from statbox.hypothesis.backends.cpu import CPUHypothesisBackend


BackendChoice = Literal['cpu', 'auto']

KSTEST_OPTIONS = ("alpha", "tail", "cdf")


def _get_backend(backend: str = 'cpu'):
    """
    Select backend for hypothesis tests.

    Only a CPU backend exists; 'auto' resolves to it.
    """
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu' or 'auto'."
    )


def _parse_options(
    name_value: tuple[Any, ...],
    keywords: dict[str, Any],
) -> dict[str, Any]:
    """
    Merge name/value pairs and keyword options into one dict.

    Names are case-insensitive; later occurrences override earlier ones,
    keywords override positional pairs.
    """
    if len(name_value) % 2 != 0:
        raise ValidationError(
            "optional parameters must be given in name/value pairs"
        )

    pairs = list(zip(name_value[0::2], name_value[1::2]))
    pairs.extend(keywords.items())

    options: dict[str, Any] = {}
    for name, value in pairs:
        if not isinstance(name, str):
            raise ValidationError(
                f"option names must be strings, got {name!r}"
            )
        key = name.lower()
        if key not in KSTEST_OPTIONS:
            raise ValidationError(
                f"unknown option {name!r}. Valid options: {KSTEST_OPTIONS}"
            )
        options[key] = value
    return options


def kstest(
    x: ArrayLike | KSTestDesign,
    *name_value: Any,
    compute_critical_value: bool = True,
    backend: str = 'cpu',
    **options: Any,
) -> KSTestSolution:
    """
    Single-sample Kolmogorov-Smirnov goodness-of-fit test.

    Tests whether the sample x could have come from the distribution with
    cumulative distribution function CDF.

    Parameters
    ----------
    x : array-like or KSTestDesign
        Real vector of observations. NaN values are treated as missing.
    *name_value
        MATLAB-style option pairs, e.g. "tail", "larger".
    compute_critical_value : bool
        Compute the approximate critical value. Default True.
    backend : str
        'cpu' (default) or 'auto'.
    **options
        alpha : float
            Significance level in (0, 1). Default 0.05.
        tail : str
            "unequal" (two-sided, default), "larger" (sample CDF above the
            null CDF), or "smaller" (sample CDF below the null CDF).
        CDF : callable, str, or (k, 2) array
            Null CDF as a function, a registered distribution name (see
            statbox.distributions.available_cdfs()), or a table of
            (x, F(x)) rows. Default: standard normal.

    Returns
    -------
    KSTestSolution
        reject, p_value, statistic, critical_value (unpackable in that
        order), plus method, tail, alpha and n.

    Raises
    ------
    ValidationError
        Complex data, no non-missing observations, unknown options,
        malformed option values, malformed CDF table.
    DimensionError
        x is not a vector, or the CDF table does not have two columns.
    InterpolationRangeError
        The CDF table does not span the observations.
    """
    if isinstance(x, KSTestDesign):
        if name_value or options:
            raise ValidationError(
                "options cannot be combined with a pre-built KSTestDesign"
            )
        design = x
    else:
        opts = _parse_options(name_value, options)
        design = KSTestDesign.for_kstest(
            x,
            alpha=opts.get("alpha", 0.05),
            tail=opts.get("tail", "unequal"),
            cdf=opts.get("cdf"),
            compute_critical_value=compute_critical_value,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return KSTestSolution(_result=result, _design=design)
