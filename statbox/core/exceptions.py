"""
Exception hierarchy for statbox.

All exceptions inherit from StatboxError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Usage errors (ValidationError) are kept apart from numeric
      infeasibility (NumericalError)
"""


class StatboxError(Exception):
    """Base exception for all statbox errors."""
    pass


class ValidationError(StatboxError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: wrong arity,
    unknown option names, wrong option types, complex data, empty samples.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays cannot be reconciled to a common size.

    Attributes:
        shapes: Mapping of argument name to offending shape, if available
    """

    def __init__(
        self,
        message: str,
        shapes: dict[str, tuple[int, ...]] | None = None,
    ):
        super().__init__(message)
        self.shapes = shapes


class NumericalError(StatboxError):
    """
    Numerical computation failed.

    Base class for errors arising from numeric infeasibility rather than
    malformed arguments.
    """
    pass


class InterpolationRangeError(NumericalError):
    """
    A tabulated function does not span the points it must be evaluated at.

    Raised when a numeric CDF table handed to kstest() would have to be
    extrapolated to reach the observations.

    Attributes:
        table_range: (min, max) of the tabulated abscissae
        data_range: (min, max) of the points requested
    """

    def __init__(
        self,
        message: str,
        table_range: tuple[float, float] | None = None,
        data_range: tuple[float, float] | None = None,
    ):
        super().__init__(message)
        self.table_range = table_range
        self.data_range = data_range
