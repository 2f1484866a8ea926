"""Calculators for the Water Quality Index (ICA).

This package contains pure functions for each sub-index, the nutrient ratio,
weight selection, aggregation and classification. All calculators are
stateless and operate on Decimal values only.
"""

from ica.calculators.acidity import calculate_acidity_index
from ica.calculators.aggregation import calculate_ica_coefficient
from ica.calculators.classification import classify_ica_coefficient
from ica.calculators.conductivity import calculate_conductivity_index
from ica.calculators.demand import calculate_demand_index
from ica.calculators.nutrients import calculate_nutrient_index, calculate_nutrient_ratio
from ica.calculators.oxygen import calculate_oxygen_index
from ica.calculators.solids import calculate_solids_index
from ica.calculators.weighting import (
    FIVE_VARIABLE_WEIGHTS,
    SIX_VARIABLE_WEIGHTS,
    WeightScheme,
    count_ica_variables,
    select_weight_scheme,
)

__all__ = [
    "calculate_oxygen_index",
    "calculate_solids_index",
    "calculate_demand_index",
    "calculate_conductivity_index",
    "calculate_acidity_index",
    "calculate_nutrient_index",
    "calculate_nutrient_ratio",
    "count_ica_variables",
    "select_weight_scheme",
    "calculate_ica_coefficient",
    "classify_ica_coefficient",
    "WeightScheme",
    "FIVE_VARIABLE_WEIGHTS",
    "SIX_VARIABLE_WEIGHTS",
]
