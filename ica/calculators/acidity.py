"""pH sub-index (iph)."""

import math
from decimal import Decimal

from ica.config import CONSTANTS

ACID_LIMIT = Decimal(4)
PLATEAU_START = Decimal(7)
PLATEAU_END = Decimal(8)
ALKALINE_LIMIT = Decimal(11)

OUT_OF_RANGE_INDEX = Decimal("0.1")

ACID_COEFFICIENT = 0.02628419
ACID_RATE = 0.520025
ALKALINE_RATE = -0.5187742


def calculate_acidity_index(ph: Decimal) -> Decimal:
    """Calculate the pH sub-index.

    Segment selection uses exact decimal comparison. The exponential
    segments are evaluated in binary floating point and rounded to the
    11 significant digit context; the constant segments are exact.

    Ranges:
        ph < 4          -> 0.1
        4 <= ph <= 7    -> 0.02628419 * e ** (0.520025 * ph)
        7 < ph <= 8     -> 1
        8 < ph <= 11    -> e ** (-0.5187742 * (ph - 8))
        ph > 11         -> 0.1

    Args:
        ph: Acidity (pH units)

    Returns:
        Acidity sub-index.
    """
    if ph < ACID_LIMIT or ph > ALKALINE_LIMIT:
        return OUT_OF_RANGE_INDEX

    if ph <= PLATEAU_START:
        iph = ACID_COEFFICIENT * math.exp(float(ph) * ACID_RATE)
    elif ph <= PLATEAU_END:
        return Decimal(1)
    else:
        iph = math.exp((float(ph) - 8.0) * ALKALINE_RATE)

    return CONSTANTS.sub_index_context().create_decimal_from_float(iph)
