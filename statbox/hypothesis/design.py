"""
KSTestDesign: validated, immutable inputs for the one-sample K-S test.

Built through the for_kstest() factory, which performs every usage check
up front so that the backend only ever sees well-formed input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statbox.core.exceptions import ValidationError
from statbox.core.validation import check_array, check_vector, check_probability_open
from statbox.hypothesis._common import VALID_TAILS
from statbox.hypothesis._null_cdf import NullCdf, resolve_null_cdf


def _validate_tail(tail: Any) -> str:
    """Validate and return the tail name (case-insensitive)."""
    if not isinstance(tail, str):
        raise ValidationError(
            f"tail must be a string, got {type(tail).__name__}"
        )
    key = tail.lower()
    if key not in VALID_TAILS:
        raise ValidationError(
            f"tail must be one of {VALID_TAILS}, got {tail!r}"
        )
    return key


def _to_sample(x: ArrayLike, name: str = "x") -> NDArray[np.floating[Any]]:
    """Real vector with NaN (missing) entries removed."""
    arr = check_vector(check_array(x, name), name).astype(np.float64)
    arr = arr[~np.isnan(arr)]
    if len(arr) == 0:
        raise ValidationError(
            f"{name}: no non-missing observations; a K-S p-value needs at least one"
        )
    return arr


@dataclass(frozen=True)
class KSTestDesign:
    """
    Design for the one-sample Kolmogorov-Smirnov test.

    Do not construct directly; use KSTestDesign.for_kstest().
    """
    test_type: str
    _x: NDArray[np.floating[Any]]
    _null_cdf: NullCdf
    _alpha: float = 0.05
    _tail: str = "unequal"
    _compute_critical_value: bool = True
    _data_name: str = "x"
    _notes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def n(self) -> int:
        return len(self._x)

    @property
    def null_cdf(self) -> NullCdf:
        return self._null_cdf

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def tail(self) -> str:
        return self._tail

    @property
    def compute_critical_value(self) -> bool:
        return self._compute_critical_value

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def notes(self) -> tuple[str, ...]:
        """Non-fatal notes gathered while resolving the inputs."""
        return self._notes

    @classmethod
    def for_kstest(
        cls,
        x: ArrayLike,
        *,
        alpha: Any = 0.05,
        tail: Any = "unequal",
        cdf: Any = None,
        compute_critical_value: bool = True,
    ) -> KSTestDesign:
        """
        Build design for kstest().

        Parameters
        ----------
        x : array-like
            Real vector of observations. NaN entries are dropped.
        alpha : float
            Significance level in (0, 1). Default 0.05.
        tail : str
            "unequal" (default), "larger", or "smaller".
        cdf : callable, str, array-like, or None
            Null CDF: a function, a registered distribution name, or a
            two-column (x, F(x)) table. None selects the standard normal.
        compute_critical_value : bool
            Whether to compute the approximate critical value.
        """
        sample = _to_sample(x, "x")
        alpha = check_probability_open(alpha, "alpha")
        tail = _validate_tail(tail)
        notes: list[str] = []
        null_cdf = resolve_null_cdf(cdf, notes)

        return cls(
            test_type="ks_one_sample",
            _x=sample,
            _null_cdf=null_cdf,
            _alpha=alpha,
            _tail=tail,
            _compute_critical_value=bool(compute_critical_value),
            _data_name="x",
            _notes=tuple(notes),
        )

    def __repr__(self) -> str:
        return (
            f"KSTestDesign(test_type={self.test_type!r}, n={self.n}, "
            f"tail={self._tail!r}, alpha={self._alpha:g})"
        )
