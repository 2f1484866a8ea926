"""Domain models for the ICA engine."""

from ica.models.domain import IndexSet, NutrientRatio, RawSample
from ica.models.enums import QualityClass
from ica.models.records import DischargeMonitoring, FieldMonitoring

__all__ = [
    "RawSample",
    "NutrientRatio",
    "IndexSet",
    "QualityClass",
    "FieldMonitoring",
    "DischargeMonitoring",
]
