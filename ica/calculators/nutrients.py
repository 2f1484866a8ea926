"""Nitrogen/phosphorus ratio (rnp) and its sub-index (irnp)."""

import logging
from decimal import Decimal

from ica.config import CONSTANTS
from ica.models.domain import NutrientRatio
from ica.validation.errors import InvalidDomainValue

logger = logging.getLogger(__name__)

FIVE = Decimal(5)
TEN = Decimal(10)
FIFTEEN = Decimal(15)
TWENTY = Decimal(20)


def calculate_nutrient_index(rnp: Decimal) -> Decimal:
    """Calculate the N/P sub-index from the ratio.

    Ranges:
        5 < rnp <= 10          -> 0.35
        10 < rnp < 15          -> 0.6
        15 <= rnp <= 20        -> 0.8
        rnp <= 5 or rnp > 20   -> 0.15

    Note: rnp = 5 falls in the 0.15 bucket, not 0.35.

    Args:
        rnp: Nitrogen / phosphorus ratio

    Returns:
        Nutrient sub-index.
    """
    if FIVE < rnp <= TEN:
        return Decimal("0.35")
    if TEN < rnp < FIFTEEN:
        return Decimal("0.6")
    if FIFTEEN <= rnp <= TWENTY:
        return Decimal("0.8")
    return Decimal("0.15")


def calculate_nutrient_ratio(
    n: Decimal | None,
    p: Decimal | None,
    reject_zero_phosphorus: bool = False,
) -> NutrientRatio | None:
    """Calculate the N/P ratio and sub-index when both nutrients are usable.

    The nutrient pair is optional. Three situations leave it absent, which is
    a normal outcome rather than an error:
    - neither nutrient measured (not applicable)
    - only one nutrient measured (incomplete)
    - phosphorus == 0 (ratio undefined), unless reject_zero_phosphorus is set

    Formula:
        rnp = n / p   (11 significant digits, HALF_UP)

    Args:
        n: Total nitrogen (mg/L)
        p: Total phosphorus (mg/L)
        reject_zero_phosphorus: Raise instead of returning None when p == 0

    Returns:
        NutrientRatio, or None if the pair cannot contribute to the index.

    Raises:
        InvalidDomainValue: If p == 0 and reject_zero_phosphorus is set
    """
    if n is None and p is None:
        return None

    if n is None or p is None:
        missing = "n" if n is None else "p"
        logger.debug(f"Nutrient ratio incomplete: {missing} not measured")
        return None

    if p == 0:
        if reject_zero_phosphorus:
            msg = "Phosphorus must be non-zero to compute the N/P ratio"
            raise InvalidDomainValue(msg, field="p", value=p)
        logger.debug("Nutrient ratio undefined: phosphorus is 0")
        return None

    rnp = CONSTANTS.sub_index_context().divide(n, p)
    return NutrientRatio(ratio=rnp, index=calculate_nutrient_index(rnp))
