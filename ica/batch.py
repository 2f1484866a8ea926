"""Batch ICA computation over tabular samples.

Each DataFrame row is one sample whose raw measurement columns use the
persisted names (od, sst, dqo, ce, ph, n, p). Rows are computed independently
through the same engine used for single records.
"""

import logging
from collections import Counter
from decimal import Decimal, InvalidOperation
from typing import Literal

import pandas as pd

from ica.adapters.monitoring_adapter import index_set_to_columns
from ica.config import DEFAULT_CONFIG, IcaConfig, OutputColumns
from ica.engine import compute
from ica.models.domain import RawSample
from ica.validation.errors import IcaCalculationError, InvalidDomainValue

logger = logging.getLogger(__name__)

ErrorPolicy = Literal["raise", "skip"]


def to_decimal(value: object, field: str) -> Decimal | None:
    """Convert a DataFrame cell to Decimal without binary float noise.

    Args:
        value: Cell value (str, int, float, Decimal, None or NaN)
        field: Column name, used in error messages

    Returns:
        Decimal value, or None for empty/missing cells

    Raises:
        InvalidDomainValue: If the cell is not a finite number
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    if isinstance(value, float):
        # repr gives the shortest string that round-trips, e.g. 0.1 -> "0.1"
        value = repr(value)

    try:
        decimal_value = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        msg = f"Column '{field}' value {value!r} is not a number"
        raise InvalidDomainValue(msg, field=field) from e

    if not decimal_value.is_finite():
        msg = f"Column '{field}' value {value!r} is not finite"
        raise InvalidDomainValue(msg, field=field)
    return decimal_value


def row_to_raw_sample(row: pd.Series) -> RawSample:
    """Build a RawSample from a DataFrame row.

    Absent columns are treated as missing measurements.
    """
    values = {name: to_decimal(row.get(name), name) for name in OutputColumns.raw_fields()}
    return RawSample(**values)


def compute_frame(
    df: pd.DataFrame,
    on_error: ErrorPolicy = "raise",
    config: IcaConfig | None = None,
) -> pd.DataFrame:
    """Compute ICA values for every row of a DataFrame.

    Args:
        df: Samples, one per row, with raw measurement columns. An optional
            sample_id column is carried through; otherwise the row index is used.
        on_error: "raise" stops at the first failing row; "skip" records the
            error kind in the error column and leaves derived columns empty
        config: Engine behaviour switches (defaults to DEFAULT_CONFIG)

    Returns:
        DataFrame in OutputColumns.final_output_order(), plus an error column
        when on_error="skip".

    Raises:
        IcaCalculationError: First row failure, when on_error="raise"
        ValueError: If on_error is not a supported policy
    """
    if on_error not in ("raise", "skip"):
        msg = f"on_error must be 'raise' or 'skip', got {on_error!r}"
        raise ValueError(msg)

    config = config or DEFAULT_CONFIG
    rows = []
    classes: Counter[str] = Counter()
    failures = 0

    for row_index, row in df.iterrows():
        sample_id = row.get(OutputColumns.SAMPLE_ID, row_index)
        output = {OutputColumns.SAMPLE_ID: sample_id}
        output.update({name: row.get(name) for name in OutputColumns.raw_fields()})

        try:
            index_set = compute(row_to_raw_sample(row), config)
            columns = index_set_to_columns(index_set)
        except IcaCalculationError as e:
            if on_error == "raise":
                logger.error(f"ICA computation failed for sample {sample_id}: {e}")
                raise
            logger.warning(f"Skipping sample {sample_id}: {e.kind}: {e}")
            failures += 1
            output.update({name: None for name in OutputColumns.derived_fields()})
            output[OutputColumns.ERROR] = e.kind
            rows.append(output)
            continue

        columns[OutputColumns.QUALITY_CLASSIFICATION] = index_set.quality_class.name
        output.update(columns)
        if on_error == "skip":
            output[OutputColumns.ERROR] = None
        classes[index_set.quality_class.name] += 1
        rows.append(output)

    column_order = OutputColumns.final_output_order()
    if on_error == "skip":
        column_order = [*column_order, OutputColumns.ERROR]

    logger.info(
        f"Computed ICA for {len(rows) - failures} of {len(rows)} samples "
        f"({failures} skipped): {dict(classes)}"
    )
    return pd.DataFrame(rows, columns=column_order)
