"""Chemical oxygen demand sub-index (idqo)."""

from decimal import Decimal

# (upper bound inclusive, sub-index), ascending
DEMAND_STEPS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal(20), Decimal("0.91")),
    (Decimal(25), Decimal("0.71")),
    (Decimal(40), Decimal("0.51")),
    (Decimal(80), Decimal("0.26")),
)
ABOVE_LAST_STEP = Decimal("0.125")


def calculate_demand_index(dqo: Decimal) -> Decimal:
    """Calculate the chemical oxygen demand sub-index.

    A stepped constant function; it is deliberately discontinuous at every
    breakpoint and must not be smoothed.

    Ranges:
        dqo <= 20        -> 0.91
        20 < dqo <= 25   -> 0.71
        25 < dqo <= 40   -> 0.51
        40 < dqo <= 80   -> 0.26
        dqo > 80         -> 0.125

    Args:
        dqo: Chemical oxygen demand (mg/L)

    Returns:
        Demand sub-index.
    """
    for upper_bound, index in DEMAND_STEPS:
        if dqo <= upper_bound:
            return index
    return ABOVE_LAST_STEP
