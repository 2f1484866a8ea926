"""Enumerations for ICA results.

QualityClass is persisted by name alongside each monitoring record, so member
names must not change.
"""

from enum import Enum
from functools import total_ordering


@total_ordering
class QualityClass(Enum):
    """Five ordered water quality categories derived from the ICA coefficient.

    Members are declared from worst to best; comparisons follow that order
    (VERY_POOR < POOR < FAIR < ACCEPTABLE < GOOD).
    """

    VERY_POOR = "Very Poor"
    POOR = "Poor"
    FAIR = "Fair"
    ACCEPTABLE = "Acceptable"
    GOOD = "Good"

    @property
    def label(self) -> str:
        """Human readable label for reports."""
        return self.value

    @property
    def rank(self) -> int:
        """Position in the ordering, 0 for VERY_POOR up to 4 for GOOD."""
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QualityClass):
            return NotImplemented
        return self.rank < other.rank


_RANKS = {quality_class: rank for rank, quality_class in enumerate(QualityClass)}
