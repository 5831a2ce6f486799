"""
Core infrastructure for statbox.

This module provides shared abstractions and utilities used by all
domain-specific submodules (distributions, descriptive, hypothesis).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators and common-size reconciliation
    compute: Timing and tolerance tiers
"""

from statbox.core.result import Result
from statbox.core.exceptions import (
    StatboxError,
    ValidationError,
    DimensionError,
    NumericalError,
    InterpolationRangeError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "StatboxError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "InterpolationRangeError",
]
