"""Error definitions for ICA calculations.

Every failure of the engine is a deterministic function of its input values,
so none of these errors is retryable.
"""

from decimal import Decimal


class IcaCalculationError(ValueError):
    """Base class for errors raised while computing an ICA index set.

    Attributes:
        kind: Stable identifier of the failure, suitable for reporting
        field: Name of the offending input, if a single field is at fault
        value: The offending value, if any
    """

    kind = "ica_calculation_error"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Decimal | int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class InvalidDomainValue(IcaCalculationError):
    """A measurement lies outside the domain of its transfer function."""

    kind = "invalid_domain_value"


class InvalidVariableCount(IcaCalculationError):
    """The number of present sub-indices is neither 5 nor 6."""

    kind = "invalid_variable_count"


class InvalidCompositeRange(IcaCalculationError):
    """The composite coefficient lies outside [0, 1]."""

    kind = "invalid_composite_range"


class MissingRequiredInput(IcaCalculationError):
    """One or more of the always-required measurements is absent.

    Attributes:
        missing_fields: Names of every absent required field
    """

    kind = "missing_required_input"

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        message = f"Missing required measurements: {', '.join(self.missing_fields)}"
        field = self.missing_fields[0] if len(self.missing_fields) == 1 else None
        super().__init__(message, field=field)
