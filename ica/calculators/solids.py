"""Total suspended solids sub-index (isst)."""

from decimal import Decimal

from ica.config import CONSTANTS

LOWER_BREAKPOINT = Decimal("4.5")
UPPER_BREAKPOINT = Decimal(320)
INTERCEPT = Decimal("1.02")
SLOPE = Decimal("0.003")


def calculate_solids_index(sst: Decimal) -> Decimal:
    """Calculate the suspended solids sub-index.

    Formula:
        sst <= 4.5:        isst = 1
        sst >= 320:        isst = 0
        4.5 < sst < 320:   isst = 1 - (-0.02 + 0.003 * sst) = 1.02 - 0.003 * sst

    The linear segment meets both constant segments, so the function is
    continuous.

    Args:
        sst: Total suspended solids (mg/L)

    Returns:
        Solids sub-index.
    """
    if sst <= LOWER_BREAKPOINT:
        return Decimal(1)
    if sst >= UPPER_BREAKPOINT:
        return Decimal(0)

    ctx = CONSTANTS.sub_index_context()
    return ctx.subtract(INTERCEPT, ctx.multiply(SLOPE, sst))
