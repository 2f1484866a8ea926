"""Validation protocol definitions."""

from decimal import Decimal
from typing import Protocol


class IcaSource(Protocol):
    """Protocol for anything the ICA engine can read measurements from.

    Allows different record shapes (field monitoring samples, discharge-point
    samples, ad-hoc inputs) to be driven through the same calculations. Only
    read access is required; derived values are returned, never written back.
    """

    @property
    def od(self) -> Decimal | None:
        """Dissolved oxygen (% saturation)."""
        ...

    @property
    def sst(self) -> Decimal | None:
        """Total suspended solids (mg/L)."""
        ...

    @property
    def dqo(self) -> Decimal | None:
        """Chemical oxygen demand (mg/L)."""
        ...

    @property
    def ce(self) -> Decimal | None:
        """Electrical conductivity (uS/cm)."""
        ...

    @property
    def ph(self) -> Decimal | None:
        """Acidity (pH units)."""
        ...

    @property
    def n(self) -> Decimal | None:
        """Total nitrogen (mg/L), optional."""
        ...

    @property
    def p(self) -> Decimal | None:
        """Total phosphorus (mg/L), optional."""
        ...
