"""
Result envelope returned by every statbox backend.

A backend fills `params` with its own frozen payload (for the K-S test,
KSTestParams) and records which numeric path it took in `info`, so a
solution object can report both the answer and how it was obtained.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen output of a backend solve.

        Result(
            params=KSTestParams(...),
            info={'test_type': 'ks_one_sample', 'pvalue_method': 'matrix_power', 'n': 25},
            timing={'total_seconds': 0.001, 'ks_one_sample': 0.0009},
            backend_name='cpu_hypothesis',
            warnings=('critical value not tabulated for alpha=0.5 ...',),
        )

    `timing` is None when the result was built without a Timer (tests do
    this). `warnings` holds the non-fatal notes gathered while resolving
    the inputs and computing the answer.
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if some warning mentions `substring`."""
        return any(substring in note for note in self.warnings)
