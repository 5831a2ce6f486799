"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from statbox.core.result import Result
from statbox.core.compute.timing import Timer
from statbox.hypothesis._common import KSTestParams
from statbox.hypothesis.design import KSTestDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: KSTestDesign) -> Result[KSTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        test_type = design.test_type

        with Timer() as timer:
            with timer.section(test_type):
                if test_type == "ks_one_sample":
                    from statbox.hypothesis.backends._ks_test import ks_one_sample
                    params, warnings_list = ks_one_sample(design)
                else:
                    raise ValueError(f"Unknown test_type: {test_type!r}")

        return Result(
            params=params,
            info={
                'test_type': test_type,
                'pvalue_method': params.pvalue_method,
                'n': params.n,
            },
            timing=timer.as_dict(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
