"""Quality classification of the ICA coefficient."""

from decimal import Decimal

from ica.models.enums import QualityClass
from ica.validation.errors import InvalidCompositeRange

# (upper bound inclusive, class), ascending; the lower bound of each range is
# exclusive except for the first, which starts at 0 inclusive
QUALITY_RANGES: tuple[tuple[Decimal, QualityClass], ...] = (
    (Decimal("0.25"), QualityClass.VERY_POOR),
    (Decimal("0.5"), QualityClass.POOR),
    (Decimal("0.7"), QualityClass.FAIR),
    (Decimal("0.9"), QualityClass.ACCEPTABLE),
    (Decimal(1), QualityClass.GOOD),
)


def classify_ica_coefficient(coefficient: Decimal) -> QualityClass:
    """Classify an ICA coefficient into one of five quality categories.

    Ranges:
        [0, 0.25]     -> VERY_POOR
        (0.25, 0.5]   -> POOR
        (0.5, 0.7]    -> FAIR
        (0.7, 0.9]    -> ACCEPTABLE
        (0.9, 1]      -> GOOD

    Args:
        coefficient: Composite ICA coefficient

    Returns:
        QualityClass for the coefficient.

    Raises:
        InvalidCompositeRange: If coefficient is outside [0, 1]
    """
    if coefficient >= 0:
        for upper_bound, quality_class in QUALITY_RANGES:
            if coefficient <= upper_bound:
                return quality_class

    msg = f"ICA coefficient must be between 0 and 1, but was: {coefficient}"
    raise InvalidCompositeRange(msg, field="ica_coefficient", value=coefficient)
