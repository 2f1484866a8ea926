"""Electrical conductivity sub-index (ice)."""

import math
from decimal import Decimal

from ica.config import CONSTANTS
from ica.validation.errors import InvalidDomainValue

LOG_INTERCEPT = -3.26
LOG_SLOPE = 1.34


def calculate_conductivity_index(ce: Decimal) -> Decimal:
    """Calculate the conductivity sub-index.

    Formula:
        ice = 1 - 10 ** (-3.26 + 1.34 * log10(ce))
        ice = 0 if the result is negative

    The power law is evaluated in binary floating point, then converted
    exactly and rounded to the 11 significant digit context. Only the lower
    bound is clamped; no upper clamp is applied.

    Args:
        ce: Electrical conductivity (uS/cm)

    Returns:
        Conductivity sub-index.

    Raises:
        InvalidDomainValue: If ce <= 0, or ce is too small to survive
            conversion to float (logarithm undefined)
    """
    ce_value = float(ce)
    if ce <= 0 or ce_value <= 0:
        msg = f"Conductivity must be greater than 0 for the logarithm, got {ce}"
        raise InvalidDomainValue(msg, field="ce", value=ce)

    exponent = LOG_INTERCEPT + LOG_SLOPE * math.log10(ce_value)
    ice = 1.0 - math.pow(10, exponent)
    if ice < 0:
        ice = 0.0

    return CONSTANTS.sub_index_context().create_decimal_from_float(ice)
