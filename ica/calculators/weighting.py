"""Variable counting and weight scheme selection for the ICA coefficient."""

from dataclasses import dataclass
from decimal import Decimal

from ica.validation.errors import InvalidVariableCount


@dataclass(frozen=True)
class WeightScheme:
    """Per sub-index weights for one aggregation scheme.

    Only two schemes exist; both sum to 1. A nutrient weight of None means the
    scheme has no nutrient term.
    """

    variable_count: int
    oxygen: Decimal
    solids: Decimal
    demand: Decimal
    conductivity: Decimal
    acidity: Decimal
    nutrient: Decimal | None = None

    def weights(self) -> tuple[Decimal | None, ...]:
        """Return weights in aggregation order (oxygen ... nutrient)."""
        return (
            self.oxygen,
            self.solids,
            self.demand,
            self.conductivity,
            self.acidity,
            self.nutrient,
        )


FIVE_VARIABLE_WEIGHTS = WeightScheme(
    variable_count=5,
    oxygen=Decimal("0.2"),
    solids=Decimal("0.2"),
    demand=Decimal("0.2"),
    conductivity=Decimal("0.2"),
    acidity=Decimal("0.2"),
)

SIX_VARIABLE_WEIGHTS = WeightScheme(
    variable_count=6,
    oxygen=Decimal("0.17"),
    solids=Decimal("0.17"),
    demand=Decimal("0.17"),
    conductivity=Decimal("0.17"),
    acidity=Decimal("0.15"),
    nutrient=Decimal("0.17"),
)

WEIGHT_SCHEMES: dict[int, WeightScheme] = {
    FIVE_VARIABLE_WEIGHTS.variable_count: FIVE_VARIABLE_WEIGHTS,
    SIX_VARIABLE_WEIGHTS.variable_count: SIX_VARIABLE_WEIGHTS,
}


def count_ica_variables(*indices: Decimal | None) -> int:
    """Count how many sub-indices are present.

    Args:
        indices: Sub-indices in any order; None marks an absent one

    Returns:
        Number of non-None sub-indices.
    """
    return sum(1 for index in indices if index is not None)


def select_weight_scheme(variable_count: int) -> WeightScheme:
    """Select the weight scheme for the number of present sub-indices.

    Args:
        variable_count: Number of present sub-indices

    Returns:
        The 5- or 6-variable WeightScheme.

    Raises:
        InvalidVariableCount: If variable_count is neither 5 nor 6
    """
    scheme = WEIGHT_SCHEMES.get(variable_count)
    if scheme is None:
        msg = f"Number of ICA variables must be 5 or 6, but was: {variable_count}"
        raise InvalidVariableCount(msg, field="variable_count", value=variable_count)
    return scheme
