"""
Hypergeometric distribution: density, CDF, quantile and random variates.

The hypergeometric distribution describes the number of marked items
obtained when drawing `n` items without replacement from a population of
`t` items of which `m` are marked.

All functions follow the MATLAB "common size" convention: each argument is
either a scalar or an array, and every array argument must share one shape.
Invalid parameter combinations (negative or fractional counts, m > t,
n > t, n == 0) never raise; they produce NaN in the cells they drive.

Densities are evaluated in log space through scipy.special.betaln, so
populations of many thousands of items do not overflow.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import betaln

from statbox.core.exceptions import ValidationError, DimensionError
from statbox.core.validation import (
    check_array,
    check_vector,
    check_nonnegative_integer,
    common_size,
)


VECTOREXPAND = "vectorexpand"

# Cumulative sums of log-space densities miss the exact breakpoints by
# rounding that grows with the size of the log binomials. Quantile targets
# are lowered by this relative amount so a probability equal to CDF(k)
# still maps to k.
_BREAKPOINT_RTOL = 1e-12


def _valid_params(t: NDArray, m: NDArray, n: NDArray) -> NDArray[np.bool_]:
    """Mask of parameter triples describing a proper distribution."""
    return (
        np.isfinite(t)
        & (t >= 0) & (m >= 0) & (n > 0) & (m <= t) & (n <= t)
        & (t == np.fix(t)) & (m == np.fix(m)) & (n == np.fix(n))
    )


def _result_dtype(*arrays: NDArray) -> type:
    """float32 if any input is single precision, float64 otherwise."""
    if any(a.dtype == np.float32 for a in arrays):
        return np.float32
    return np.float64


def _log_comb(n: NDArray, k: NDArray) -> NDArray:
    """log C(n, k) for 0 <= k <= n."""
    return -np.log1p(n) - betaln(n - k + 1.0, k + 1.0)


def _pdf_kernel(x: NDArray, t: NDArray, m: NDArray, n: NDArray) -> NDArray:
    """Density with numpy broadcasting across all four arguments."""
    x, t, m, n = np.broadcast_arrays(
        *(np.asarray(a, dtype=np.float64) for a in (x, t, m, n))
    )
    pdf = np.zeros(x.shape, dtype=np.float64)

    ok = _valid_params(t, m, n)
    pdf[~ok] = np.nan

    k = (
        ok
        & (x == np.fix(x))
        & (x >= np.maximum(0.0, n - (t - m)))
        & (x <= np.minimum(n, m))
    )
    if np.any(k):
        xk, tk, mk, nk = x[k], t[k], m[k], n[k]
        log_p = _log_comb(mk, xk) + _log_comb(tk - mk, nk - xk) - _log_comb(tk, nk)
        pdf[k] = np.exp(log_p)

    pdf[np.isnan(x)] = np.nan
    return pdf


def _cdf_rows(
    t: NDArray, m: NDArray, n: NDArray,
) -> tuple[NDArray, NDArray]:
    """
    Per-row normalized CDFs over the shared support 0..max(n).

    Each row is cumulated across the full shared support and then divided
    by its own cumulative value at index n_row, so padding columns past a
    row's own sample size never influence its normalization.

    Parameters
    ----------
    t, m, n : NDArray
        1D arrays of valid parameters, one entry per row.

    Returns
    -------
    v : NDArray
        Shared support 0..max(n).
    cdf : NDArray
        (len(n), len(v)) matrix of normalized cumulative probabilities.
    """
    v = np.arange(0, int(np.max(n)) + 1, dtype=np.float64)
    p = np.cumsum(_pdf_kernel(v[None, :], t[:, None], m[:, None], n[:, None]), axis=1)
    end = p[np.arange(len(n)), n.astype(np.intp)]
    return v, p / end[:, None]


def _row_lookup(
    v: NDArray, cdf: NDArray, n: NDArray, target: NDArray, side: str,
) -> NDArray:
    """
    Map each row's target probability to a support value.

    Rows are independent: row i searches only cdf[i, :n[i] + 1].
    side='left' returns the first k with CDF(k) >= target,
    side='right' the first k with CDF(k) > target.
    """
    out = np.empty(len(n), dtype=np.float64)
    for i, (row_n, q) in enumerate(zip(n.astype(np.intp), target)):
        idx = np.searchsorted(cdf[i, :row_n + 1], q, side=side)
        out[i] = v[min(idx, row_n)]
    return out


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def hygepdf(
    x: ArrayLike,
    t: ArrayLike,
    m: ArrayLike,
    n: ArrayLike,
    mode: str | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Hypergeometric probability density (mass) function.

    P(X = x) = C(m, x) C(t - m, n - x) / C(t, n) for integer x in
    [max(0, n - (t - m)), min(n, m)], zero elsewhere.

    Parameters
    ----------
    x : array-like
        Values at which to evaluate the density.
    t : array-like
        Total population size.
    m : array-like
        Number of marked items in the population.
    n : array-like
        Number of items drawn.
    mode : str or None
        None (default): element-wise evaluation; x, t, m and n must be of
        common size or scalars.
        "vectorexpand": x is a vector of support points evaluated against
        every element of the (common-size) parameter arrays. The result has
        shape (number of parameter elements, len(x)).

    Returns
    -------
    NDArray
        Densities. NaN wherever x is NaN or the parameters are invalid.

    Raises
    ------
    ValidationError
        If an argument is complex or non-numeric, or mode is unknown.
    DimensionError
        If the arguments are not of common size.
    """
    x_arr = check_array(x, "x")
    t_arr = check_array(t, "t")
    m_arr = check_array(m, "m")
    n_arr = check_array(n, "n")
    dtype = _result_dtype(x_arr, t_arr, m_arr, n_arr)

    if mode is None:
        shape, (x_arr, t_arr, m_arr, n_arr) = common_size(
            x_arr, t_arr, m_arr, n_arr, names=("x", "t", "m", "n"),
        )
        return _pdf_kernel(x_arr, t_arr, m_arr, n_arr).reshape(shape).astype(dtype)

    if isinstance(mode, str) and mode.lower() == VECTOREXPAND:
        x_vec = check_vector(x_arr, "x")
        _, (t_arr, m_arr, n_arr) = common_size(
            t_arr, m_arr, n_arr, names=("t", "m", "n"),
        )
        pdf = _pdf_kernel(
            x_vec[None, :],
            t_arr.reshape(-1, 1), m_arr.reshape(-1, 1), n_arr.reshape(-1, 1),
        )
        return pdf.astype(dtype)

    raise ValidationError(
        f"mode must be None or {VECTOREXPAND!r}, got {mode!r}"
    )


def hygecdf(
    x: ArrayLike,
    t: ArrayLike,
    m: ArrayLike,
    n: ArrayLike,
    upper: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Hypergeometric cumulative distribution function.

    Parameters
    ----------
    x : array-like
        Values at which to evaluate the CDF. Non-integers are floored.
    t, m, n : array-like
        Population size, marked items, items drawn.
    upper : bool
        If True, return the upper tail P(X > x), summed directly rather
        than computed as 1 - P(X <= x).

    Returns
    -------
    NDArray
        P(X <= x) (or P(X > x)). NaN wherever x is NaN or the parameters
        are invalid.
    """
    x_arr = check_array(x, "x")
    t_arr = check_array(t, "t")
    m_arr = check_array(m, "m")
    n_arr = check_array(n, "n")
    dtype = _result_dtype(x_arr, t_arr, m_arr, n_arr)

    shape, (x_arr, t_arr, m_arr, n_arr) = common_size(
        x_arr, t_arr, m_arr, n_arr, names=("x", "t", "m", "n"),
    )
    x_arr, t_arr, m_arr, n_arr = (
        a.reshape(-1).astype(np.float64) for a in (x_arr, t_arr, m_arr, n_arr)
    )

    cdf = np.full(x_arr.shape, np.nan)
    ok = _valid_params(t_arr, m_arr, n_arr) & ~np.isnan(x_arr)
    if np.any(ok):
        xo = np.floor(x_arr[ok])
        to, mo, no = t_arr[ok], m_arr[ok], n_arr[ok]
        v = np.arange(0, int(np.max(no)) + 1, dtype=np.float64)
        pdf = _pdf_kernel(v[None, :], to[:, None], mo[:, None], no[:, None])
        rows = np.arange(len(xo))
        lo = np.maximum(0.0, no - (to - mo))
        hi = np.minimum(no, mo)

        if upper:
            tail = np.cumsum(pdf[:, ::-1], axis=1)[:, ::-1]
            tail = np.hstack([tail, np.zeros((len(xo), 1))])
            idx = np.clip(xo + 1, 0, len(v)).astype(np.intp)
            vals = tail[rows, idx]
            vals[xo < lo] = 1.0
            vals[xo >= hi] = 0.0
        else:
            cum = np.cumsum(pdf, axis=1)
            idx = np.clip(xo, 0, len(v) - 1).astype(np.intp)
            vals = cum[rows, idx]
            vals[xo < lo] = 0.0
            vals[xo >= hi] = 1.0

        cdf[ok] = np.clip(vals, 0.0, 1.0)

    return cdf.reshape(shape).astype(dtype)


def hygeinv(
    x: ArrayLike,
    t: ArrayLike,
    m: ArrayLike,
    n: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Hypergeometric quantile function (inverse CDF).

    Returns the smallest integer k in the support with CDF(k) >= x.
    A probability landing exactly on a cumulative breakpoint returns that
    breakpoint's value.

    Parameters
    ----------
    x : array-like
        Probabilities.
    t, m, n : array-like
        Population size, marked items, items drawn.

    Returns
    -------
    NDArray
        Quantiles with the common shape of the inputs. x == 0 gives 0,
        x == 1 gives n, x outside [0, 1] or NaN gives NaN, invalid
        parameters give NaN.

    Raises
    ------
    ValidationError
        If an argument is complex or non-numeric.
    DimensionError
        If the arguments are not of common size.
    """
    x_arr = check_array(x, "x")
    t_arr = check_array(t, "t")
    m_arr = check_array(m, "m")
    n_arr = check_array(n, "n")
    dtype = _result_dtype(x_arr, t_arr, m_arr, n_arr)

    shape, (x_arr, t_arr, m_arr, n_arr) = common_size(
        x_arr, t_arr, m_arr, n_arr, names=("x", "t", "m", "n"),
    )
    x_arr, t_arr, m_arr, n_arr = (
        a.reshape(-1).astype(np.float64) for a in (x_arr, t_arr, m_arr, n_arr)
    )

    inv = np.full(x_arr.shape, np.nan)
    ok = _valid_params(t_arr, m_arr, n_arr)

    at_zero = ok & (x_arr == 0)
    inv[at_zero] = 0.0
    at_one = ok & (x_arr == 1)
    inv[at_one] = n_arr[at_one]

    inner = ok & (x_arr > 0) & (x_arr < 1)
    if np.any(inner):
        to, mo, no = t_arr[inner], m_arr[inner], n_arr[inner]
        target = x_arr[inner] * (1.0 - _BREAKPOINT_RTOL)
        scalar_params = (
            np.all(to == to[0]) and np.all(mo == mo[0]) and np.all(no == no[0])
        )
        if scalar_params:
            v, cdf = _cdf_rows(to[:1], mo[:1], no[:1])
            row = cdf[0, :int(no[0]) + 1]
            idx = np.searchsorted(row, target, side="left")
            inv[inner] = v[np.minimum(idx, int(no[0]))]
        else:
            v, cdf = _cdf_rows(to, mo, no)
            inv[inner] = _row_lookup(v, cdf, no, target, side="left")

    return inv.reshape(shape).astype(dtype)


def _parse_size(
    size: tuple[Any, ...],
    default: tuple[int, ...],
) -> tuple[int, ...]:
    """Resolve hygernd's trailing size arguments into an output shape."""
    if len(size) == 0:
        return default

    if len(size) == 1:
        arg = np.asarray(size[0])
        if arg.size == 1 and arg.ndim <= 1:
            r = check_nonnegative_integer(arg.reshape(()).item(), "size")
            return (r, r)
        if arg.ndim == 1 or (arg.ndim == 2 and arg.shape[0] == 1):
            return tuple(
                check_nonnegative_integer(d, "size") for d in arg.ravel().tolist()
            )
        raise ValidationError(
            "size: dimension vector must be a row vector of non-negative integers, "
            f"got shape {arg.shape}"
        )

    dims = []
    for d in size:
        if np.asarray(d).size != 1:
            raise ValidationError(
                "size: dimensions must be non-negative integer scalars"
            )
        dims.append(check_nonnegative_integer(np.asarray(d).reshape(()).item(), "size"))
    return tuple(dims)


def hygernd(
    t: ArrayLike,
    m: ArrayLike,
    n: ArrayLike,
    *size: Any,
    random_state: int | np.random.Generator | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Random variates from the hypergeometric distribution.

    Each cell is drawn by inverse-CDF sampling against one uniform draw
    u in [0, 1): the value is the first k with CDF(k) > u, which never
    lands on a zero-probability value.

    Parameters
    ----------
    t, m, n : array-like
        Population size, marked items, items drawn.
    *size : int or sequence of int
        Output shape. No value: the common shape of t, m, n. One scalar r:
        an (r, r) matrix. One vector: explicit dimensions. Several
        scalars: one per dimension.
    random_state : int, Generator, or None
        Seed or generator for reproducible draws.

    Returns
    -------
    NDArray
        Draws of the requested shape; NaN in cells with invalid parameters.

    Raises
    ------
    ValidationError
        If parameters are complex or the size arguments are malformed.
    DimensionError
        If parameters are not of common size, or a non-scalar parameter
        does not match the requested shape.
    """
    t_arr = check_array(t, "t")
    m_arr = check_array(m, "m")
    n_arr = check_array(n, "n")
    dtype = _result_dtype(t_arr, m_arr, n_arr)

    common, (t_arr, m_arr, n_arr) = common_size(
        t_arr, m_arr, n_arr, names=("t", "m", "n"),
    )
    scalar_params = t_arr.size == 1
    sz = _parse_size(size, common)

    if not scalar_params and common != sz:
        raise DimensionError(
            f"t, m, and n must be scalar or of size {sz}, got {common}",
            shapes={"parameters": common, "size": sz},
        )

    rng = np.random.default_rng(random_state)
    rnd = np.full(sz, np.nan)

    if scalar_params:
        t0, m0, n0 = (float(a.reshape(-1)[0]) for a in (t_arr, m_arr, n_arr))
        if _valid_params(np.array(t0), np.array(m0), np.array(n0)):
            v, cdf = _cdf_rows(np.array([t0]), np.array([m0]), np.array([n0]))
            row = cdf[0, :int(n0) + 1]
            u = np.asarray(rng.random(sz))
            idx = np.searchsorted(row, u, side="right")
            rnd = np.asarray(v[np.minimum(idx, int(n0))]).reshape(sz)
        return rnd.astype(dtype)

    t_flat, m_flat, n_flat = (
        a.reshape(-1).astype(np.float64) for a in (t_arr, m_arr, n_arr)
    )
    ok = _valid_params(t_flat, m_flat, n_flat)
    flat = rnd.reshape(-1)
    if np.any(ok):
        v, cdf = _cdf_rows(t_flat[ok], m_flat[ok], n_flat[ok])
        u = rng.random(int(np.sum(ok)))
        flat[ok] = _row_lookup(v, cdf, n_flat[ok], u, side="right")
    return flat.reshape(sz).astype(dtype)
