"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different numeric paths:
- exact paths (matrix-power and Smirnov p-values): agreement between
  independent exact algorithms
- closed-form tail approximations: about seven decimal places
- tabulated/approximated critical values: four decimals

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-12,
    name='exact_fp64',
    description='Double precision, independent exact algorithms',
)

TAIL_APPROXIMATION = ToleranceTier(
    rtol=0.0,
    atol=1e-7,
    name='tail_approximation',
    description='Closed-form Kolmogorov tail, ~7 decimal places',
)

CRITICAL_VALUE = ToleranceTier(
    rtol=0.0,
    atol=1e-4,
    name='critical_value',
    description="Miller's table/approximation, four decimals",
)


def select_tolerance(pvalue_method: str) -> ToleranceTier:
    """Select the tolerance tier matching a kstest p-value method."""
    if pvalue_method == 'tail_approximation':
        return TAIL_APPROXIMATION
    return EXACT_FP64
