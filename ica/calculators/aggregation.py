"""Weighted aggregation of sub-indices into the ICA coefficient."""

from decimal import Decimal

from ica.calculators.weighting import WeightScheme
from ica.config import CONSTANTS


def calculate_ica_coefficient(
    indices: tuple[Decimal | None, ...],
    scheme: WeightScheme,
) -> Decimal:
    """Combine sub-indices into the composite ICA coefficient.

    Every multiplication and every running addition is rounded in the
    3 significant digit HALF_UP context, starting from zero and following the
    fixed order oxygen, solids, demand, conductivity, acidity, nutrient. The
    sub-indices themselves arrive at 11 significant digits; the two contexts
    are kept separate.

    Formula (5 variables):
        ica = 0.2*iod + 0.2*isst + 0.2*idqo + 0.2*ice + 0.2*iph
    Formula (6 variables):
        ica = 0.17*iod + 0.17*isst + 0.17*idqo + 0.17*ice + 0.15*iph + 0.17*irnp

    Args:
        indices: Sub-indices in aggregation order (oxygen ... nutrient)
        scheme: Weight scheme selected for the number of present sub-indices

    Returns:
        Composite ICA coefficient.
    """
    ctx = CONSTANTS.coefficient_context()
    coefficient = Decimal(0)

    for index, weight in zip(indices, scheme.weights(), strict=True):
        if index is None or weight is None:
            continue
        coefficient = ctx.add(coefficient, ctx.multiply(index, weight))

    return coefficient
