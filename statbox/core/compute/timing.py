"""
Wall-clock timing of backend solves.

A Timer wraps one solve; the phases inside it (statistic, p-value,
critical value) are recorded as named sections and the whole lands in
Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Times one solve and its named phases.

        with Timer() as timer:
            with timer.section('ks_one_sample'):
                params, notes = ks_one_sample(design)
        timer.as_dict()
        # {'total_seconds': 0.0011, 'ks_one_sample': 0.0010}
    """

    def __init__(self):
        self._began: float | None = None
        self._total: float | None = None
        self._phases: dict[str, float] = {}

    def __enter__(self) -> 'Timer':
        self._began = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to phase `name`."""
        if self._began is None:
            raise RuntimeError("Timer.section() used outside a 'with Timer()' block")
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + time.perf_counter() - began

    def as_dict(self) -> dict[str, float]:
        """Total and per-phase seconds; only valid once the solve has finished."""
        if self._total is None:
            raise RuntimeError("Timer.as_dict() called before the timed block finished")
        return {'total_seconds': self._total, **self._phases}
