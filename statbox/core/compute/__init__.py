"""
Shared numeric infrastructure for statbox.

Domain backends live in {domain}/backends/; this package only holds what
they share.

Submodules:
    timing: Wall-clock timing of backend solves
    tolerances: Precision tiers for numerical comparison
"""

from statbox.core.compute.timing import Timer

__all__ = [
    "Timer",
]
