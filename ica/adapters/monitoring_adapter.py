"""Convert between monitoring records and ICA engine values.

This adapter lets both monitoring record shapes share the single set of ICA
formulas: raw measurements are read through the IcaSource protocol, and the
resulting IndexSet is merged into a copy of the record at the persisted
column scale.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TypeVar

from ica.config import CONSTANTS, IcaConfig
from ica.engine import compute
from ica.models.domain import IndexSet, RawSample
from ica.models.records import MeasurementFields
from ica.validation.errors import InvalidDomainValue
from ica.validation.protocols import IcaSource

RecordT = TypeVar("RecordT", bound=MeasurementFields)


def to_raw_sample(source: IcaSource) -> RawSample:
    """Copy the raw measurements of any IcaSource into a RawSample.

    Args:
        source: Record or object exposing od, sst, dqo, ce, ph, n and p

    Returns:
        RawSample holding the same measurement values
    """
    return RawSample(
        od=source.od,
        sst=source.sst,
        dqo=source.dqo,
        ce=source.ce,
        ph=source.ph,
        n=source.n,
        p=source.p,
    )


def to_storage_scale(
    value: Decimal | None, scale: Decimal, field: str | None = None
) -> Decimal | None:
    """Quantize a derived value to its persisted column scale (HALF_UP).

    Args:
        value: Value to quantize, or None
        scale: Smallest representable step, e.g. Decimal("0.001")
        field: Column name, used in error messages

    Returns:
        Quantized value, or None if value is None

    Raises:
        InvalidDomainValue: If the value has too many digits to store at scale
    """
    if value is None:
        return None
    try:
        return value.quantize(scale, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        msg = f"Value {value} for '{field}' cannot be stored with scale {scale}"
        raise InvalidDomainValue(msg, field=field, value=value) from e


def index_set_to_columns(index_set: IndexSet) -> dict:
    """Map an IndexSet onto the persisted ICA column names.

    Sub-indices and the ratio are stored with 3 fractional digits, the
    coefficient with 2.

    Args:
        index_set: Engine result

    Returns:
        Dict keyed by record column name
    """
    index_scale = CONSTANTS.INDEX_SCALE
    return {
        "iod": to_storage_scale(index_set.oxygen_index, index_scale, "iod"),
        "isst": to_storage_scale(index_set.solids_index, index_scale, "isst"),
        "idqo": to_storage_scale(index_set.demand_index, index_scale, "idqo"),
        "ice": to_storage_scale(index_set.conductivity_index, index_scale, "ice"),
        "iph": to_storage_scale(index_set.acidity_index, index_scale, "iph"),
        "rnp": to_storage_scale(index_set.nutrient_ratio, index_scale, "rnp"),
        "irnp": to_storage_scale(index_set.nutrient_index, index_scale, "irnp"),
        "number_ica_variables": index_set.variable_count,
        "ica_coefficient": to_storage_scale(
            index_set.ica_coefficient, CONSTANTS.COEFFICIENT_SCALE, "ica_coefficient"
        ),
        "quality_classification": index_set.quality_class,
    }


def apply_index_set(record: RecordT, index_set: IndexSet) -> RecordT:
    """Return a copy of record with the derived ICA columns filled in.

    The original record is left untouched. Derived columns from any previous
    calculation are overwritten, including clearing rnp/irnp when the new
    result has no nutrient pair.

    Args:
        record: FieldMonitoring or DischargeMonitoring
        index_set: Result of ica.engine.compute for that record

    Returns:
        New record of the same type
    """
    return record.model_copy(update=index_set_to_columns(index_set))


def with_ica(record: RecordT, config: IcaConfig | None = None) -> RecordT:
    """Compute ICA values for a record and merge them into a copy of it.

    Args:
        record: FieldMonitoring or DischargeMonitoring
        config: Engine behaviour switches

    Returns:
        New record of the same type with derived columns populated

    Raises:
        IcaCalculationError: Any engine failure; the record is not copied
    """
    return apply_index_set(record, compute(record, config))
