"""Validation module for ICA inputs.

This module provides:
1. The IcaSource protocol - read-only access to raw measurements
2. Required-input checks run before any calculation
3. The typed error taxonomy raised by the engine
"""

from ica.validation.errors import (
    IcaCalculationError,
    InvalidCompositeRange,
    InvalidDomainValue,
    InvalidVariableCount,
    MissingRequiredInput,
)
from ica.validation.protocols import IcaSource
from ica.validation.raw_sample import require_inputs, validate_required_inputs

__all__ = [
    "IcaCalculationError",
    "InvalidDomainValue",
    "InvalidVariableCount",
    "InvalidCompositeRange",
    "MissingRequiredInput",
    "IcaSource",
    "require_inputs",
    "validate_required_inputs",
]
