"""Output strategies for ICA results."""

from ica.outputs.base import OutputStrategy
from ica.outputs.csv import CSVOutputStrategy

__all__ = ["OutputStrategy", "CSVOutputStrategy"]
