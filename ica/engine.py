"""ICA engine - derives a complete IndexSet from raw measurements.

Pipeline (data-dependency order):
1. Check the five required measurements are present
2. Five core sub-indices (oxygen, solids, demand, conductivity, acidity)
3. Optional nitrogen/phosphorus ratio and sub-index
4. Variable count and weight scheme selection
5. Weighted aggregation into the ICA coefficient
6. Quality classification

The engine only reads from its input and builds the IndexSet once every
step has succeeded, so a failure never leaves a partially derived result.
"""

import logging
from collections.abc import Iterable

from ica.calculators import (
    calculate_acidity_index,
    calculate_conductivity_index,
    calculate_demand_index,
    calculate_ica_coefficient,
    calculate_nutrient_ratio,
    calculate_oxygen_index,
    calculate_solids_index,
    classify_ica_coefficient,
    count_ica_variables,
    select_weight_scheme,
)
from ica.config import DEFAULT_CONFIG, IcaConfig
from ica.models.domain import IndexSet
from ica.validation.protocols import IcaSource
from ica.validation.raw_sample import require_inputs

logger = logging.getLogger(__name__)


def compute(source: IcaSource, config: IcaConfig | None = None) -> IndexSet:
    """Compute every ICA value for one sample.

    Args:
        source: Any object exposing od, sst, dqo, ce, ph, n and p
            (RawSample, FieldMonitoring, DischargeMonitoring, ...)
        config: Engine behaviour switches (defaults to DEFAULT_CONFIG)

    Returns:
        Fully populated, internally consistent IndexSet.

    Raises:
        MissingRequiredInput: If od, sst, dqo, ce or ph is absent
        InvalidDomainValue: If ce <= 0 (or p == 0 with reject_zero_phosphorus)
        InvalidVariableCount: If the sub-index count is neither 5 nor 6
        InvalidCompositeRange: If the coefficient falls outside [0, 1]
    """
    config = config or DEFAULT_CONFIG
    require_inputs(source)

    oxygen_index = calculate_oxygen_index(source.od)
    solids_index = calculate_solids_index(source.sst)
    demand_index = calculate_demand_index(source.dqo)
    conductivity_index = calculate_conductivity_index(source.ce)
    acidity_index = calculate_acidity_index(source.ph)

    nutrient = calculate_nutrient_ratio(
        source.n, source.p, reject_zero_phosphorus=config.reject_zero_phosphorus
    )
    nutrient_ratio = nutrient.ratio if nutrient is not None else None
    nutrient_index = nutrient.index if nutrient is not None else None

    indices = (
        oxygen_index,
        solids_index,
        demand_index,
        conductivity_index,
        acidity_index,
        nutrient_index,
    )
    variable_count = count_ica_variables(*indices)
    scheme = select_weight_scheme(variable_count)

    ica_coefficient = calculate_ica_coefficient(indices, scheme)
    quality_class = classify_ica_coefficient(ica_coefficient)

    logger.debug(
        f"ICA computed: variables={variable_count}, coefficient={ica_coefficient}, "
        f"class={quality_class.name}"
    )

    return IndexSet(
        oxygen_index=oxygen_index,
        solids_index=solids_index,
        demand_index=demand_index,
        conductivity_index=conductivity_index,
        acidity_index=acidity_index,
        nutrient_ratio=nutrient_ratio,
        nutrient_index=nutrient_index,
        variable_count=variable_count,
        ica_coefficient=ica_coefficient,
        quality_class=quality_class,
    )


def compute_many(sources: Iterable[IcaSource], config: IcaConfig | None = None) -> list[IndexSet]:
    """Compute IndexSets for several samples, stopping at the first failure.

    Args:
        sources: Samples to compute
        config: Engine behaviour switches (defaults to DEFAULT_CONFIG)

    Returns:
        One IndexSet per sample, in input order.
    """
    return [compute(source, config) for source in sources]
