"""Dissolved oxygen sub-index (iod)."""

from decimal import Decimal

from ica.config import CONSTANTS

ONE = Decimal(1)
HUNDRED = Decimal(100)
PERCENT = Decimal("0.01")


def calculate_oxygen_index(od: Decimal) -> Decimal:
    """Calculate the dissolved oxygen sub-index.

    Saturation above 100% is penalised symmetrically to a deficit, so the
    sub-index peaks at exactly 1 for od = 100.

    Formula:
        od > 100:  iod = 1 - (0.01 * od - 1)
        od <= 100: iod = 1 - (1 - 0.01 * od)

    Each intermediate step is rounded in the 11 significant digit context.

    Args:
        od: Dissolved oxygen (% saturation)

    Returns:
        Oxygen sub-index.
    """
    ctx = CONSTANTS.sub_index_context()
    saturation = ctx.multiply(PERCENT, od)

    if od > HUNDRED:
        return ctx.subtract(ONE, ctx.subtract(saturation, ONE))
    return ctx.subtract(ONE, ctx.subtract(ONE, saturation))
