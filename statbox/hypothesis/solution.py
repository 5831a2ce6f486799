"""
Hypothesis test solution types.

KSTestSolution wraps Result[KSTestParams], exposes every field as a
property, and prints an R-style htest summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import math

from statbox.core.result import Result
from statbox.hypothesis._common import KSTestParams
from statbox.hypothesis.backends._ks_test import statistic_name

if TYPE_CHECKING:
    from statbox.hypothesis.design import KSTestDesign


_ALTERNATIVES = {
    "unequal": "the sample CDF is not equal to the null CDF",
    "larger": "the sample CDF is larger than the null CDF",
    "smaller": "the sample CDF is smaller than the null CDF",
}


@dataclass
class KSTestSolution:
    """
    User-facing K-S test results.

    Unpacks like the MATLAB call it mirrors:

        h, p, ksstat, cv = kstest(x)
    """
    _result: Result[KSTestParams]
    _design: 'KSTestDesign | None'

    @property
    def reject(self) -> bool:
        """True if the null hypothesis is rejected at level alpha."""
        return self._result.params.reject

    @property
    def h(self) -> bool:
        """Alias of reject."""
        return self._result.params.reject

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """'D', 'D^+' or 'D^-' depending on the tail."""
        return statistic_name(self._result.params.tail)

    @property
    def critical_value(self) -> float | None:
        """Approximate critical value; NaN outside the tabulated range, None if not requested."""
        return self._result.params.critical_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def tail(self) -> str:
        return self._result.params.tail

    @property
    def n(self) -> int:
        """Sample size after dropping NaN."""
        return self._result.params.n

    @property
    def pvalue_method(self) -> str:
        return self._result.params.pvalue_method

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[Any]:
        p = self._result.params
        return iter((p.reject, p.p_value, p.statistic, p.critical_value))

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:
            One-sample Kolmogorov-Smirnov test

        data:  x
        D^+ = 0.2197, p-value = 5.0854e-05
        alternative hypothesis: the sample CDF is larger than the null CDF
        critical value at alpha = 0.05: 0.1207
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]
        lines.append(
            f"{self.statistic_name} = {p.statistic:.5g}, "
            f"p-value = {_format_pvalue(p.p_value)}"
        )
        lines.append(f"alternative hypothesis: {_ALTERNATIVES[p.tail]}")
        if p.critical_value is not None:
            cv = "NaN" if math.isnan(p.critical_value) else f"{p.critical_value:.4f}"
            lines.append(f"critical value at alpha = {p.alpha:g}: {cv}")
        lines.append(
            f"decision: {'reject' if p.reject else 'do not reject'} the null hypothesis"
        )
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"KSTestSolution(method={p.method!r}, {self.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, reject={p.reject})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
