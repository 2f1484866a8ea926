"""Water Quality Index (ICA) computation engine.

Converts raw physicochemical measurements into normalized sub-indices, a
weighted composite coefficient and a quality classification.
"""

from ica.engine import compute, compute_many
from ica.models import IndexSet, QualityClass, RawSample

__all__ = ["compute", "compute_many", "IndexSet", "QualityClass", "RawSample"]
