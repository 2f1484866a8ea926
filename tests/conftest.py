"""Shared fixtures for ICA tests."""

from datetime import date
from decimal import Decimal

import pytest

from ica.models import DischargeMonitoring, FieldMonitoring, RawSample


@pytest.fixture
def five_variable_sample() -> RawSample:
    """Sample without nutrients (od=80, sst=10, dqo=15, ce=500, ph=7.5)."""
    return RawSample(
        od=Decimal("80"),
        sst=Decimal("10"),
        dqo=Decimal("15"),
        ce=Decimal("500"),
        ph=Decimal("7.5"),
    )


@pytest.fixture
def six_variable_sample() -> RawSample:
    """Same sample with nitrogen and phosphorus (N/P = 15)."""
    return RawSample(
        od=Decimal("80"),
        sst=Decimal("10"),
        dqo=Decimal("15"),
        ce=Decimal("500"),
        ph=Decimal("7.5"),
        n=Decimal("30"),
        p=Decimal("2"),
    )


@pytest.fixture
def field_monitoring() -> FieldMonitoring:
    """Station sample matching five_variable_sample."""
    return FieldMonitoring(
        station_id=7,
        monitoring_date=date(2025, 3, 14),
        weather_conditions="Overcast",
        water_temperature=14.5,
        performed_by="Field Team A",
        od=Decimal("80"),
        sst=Decimal("10"),
        dqo=Decimal("15"),
        ce=Decimal("500"),
        ph=Decimal("7.5"),
        flow_volume=Decimal("12.50"),
    )


@pytest.fixture
def discharge_monitoring() -> DischargeMonitoring:
    """Discharge-point sample matching six_variable_sample."""
    return DischargeMonitoring(
        discharge_id=42,
        od=Decimal("80"),
        sst=Decimal("10"),
        dqo=Decimal("15"),
        ce=Decimal("500"),
        ph=Decimal("7.5"),
        n=Decimal("30"),
        p=Decimal("2"),
        flow_volume=Decimal("3.75"),
        latitude=Decimal("4.60971000"),
        longitude=Decimal("-74.08175000"),
    )
