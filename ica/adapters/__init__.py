"""Adapters between monitoring record shapes and the ICA engine."""

from ica.adapters.monitoring_adapter import (
    apply_index_set,
    index_set_to_columns,
    to_raw_sample,
    with_ica,
)

__all__ = [
    "to_raw_sample",
    "index_set_to_columns",
    "apply_index_set",
    "with_ica",
]
