"""Monitoring record shapes that carry ICA measurements.

Two structurally different records feed the engine: samples taken at a
monitoring station and samples taken at a discharge point. Both expose the
raw measurements under the same attribute names, so both satisfy
ica.validation.protocols.IcaSource without any wrapper.

Derived fields are empty until ica.adapters.monitoring_adapter merges an
IndexSet into a copy of the record.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ica.models.enums import QualityClass


class MeasurementFields(BaseModel):
    """Raw and derived ICA columns shared by every monitoring record.

    Column names follow the persisted schema (3 fractional digits for raw
    values and sub-indices, 2 for the coefficient).
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # Raw measurements
    od: Decimal | None = Field(default=None, description="Dissolved oxygen (% saturation)")
    sst: Decimal | None = Field(default=None, description="Total suspended solids (mg/L)")
    dqo: Decimal | None = Field(default=None, description="Chemical oxygen demand (mg/L)")
    ce: Decimal | None = Field(default=None, description="Electrical conductivity (uS/cm)")
    ph: Decimal | None = Field(default=None, description="Acidity (pH units)")
    n: Decimal | None = Field(default=None, description="Total nitrogen (mg/L)")
    p: Decimal | None = Field(default=None, description="Total phosphorus (mg/L)")

    # Derived values
    rnp: Decimal | None = Field(default=None, description="N/P ratio")
    iod: Decimal | None = Field(default=None, description="Dissolved oxygen sub-index")
    isst: Decimal | None = Field(default=None, description="Suspended solids sub-index")
    idqo: Decimal | None = Field(default=None, description="Chemical oxygen demand sub-index")
    ice: Decimal | None = Field(default=None, description="Conductivity sub-index")
    iph: Decimal | None = Field(default=None, description="pH sub-index")
    irnp: Decimal | None = Field(default=None, description="N/P sub-index")
    number_ica_variables: int | None = Field(
        default=None, ge=5, le=6, description="Sub-indices in the coefficient"
    )
    ica_coefficient: Decimal | None = Field(
        default=None, ge=0, le=1, description="Composite ICA coefficient"
    )
    quality_classification: QualityClass | None = Field(
        default=None, description="Quality category of ica_coefficient"
    )

    flow_volume: Decimal = Field(ge=0, description="Flow volume (caudal) at sampling time")

    def is_calculated(self) -> bool:
        """Check whether derived ICA values have been merged into this record.

        Returns:
            True if a coefficient and classification are present
        """
        return self.ica_coefficient is not None and self.quality_classification is not None


class FieldMonitoring(MeasurementFields):
    """A sample taken at a monitoring station.

    Attributes:
        station_id: Monitoring station the sample belongs to
        monitoring_date: Date the sample was taken (one sample per station per day)
        weather_conditions: Free text weather description
        water_temperature: Water temperature (degrees C)
        air_temperature: Air temperature (degrees C)
        notes: Free text notes
        performed_by: Name of the person who took the sample
    """

    station_id: int = Field(ge=1, description="Monitoring station ID")
    monitoring_date: date = Field(description="Sampling date")
    weather_conditions: str | None = Field(default=None, description="Weather description")
    water_temperature: float | None = Field(default=None, description="Water temperature (C)")
    air_temperature: float | None = Field(default=None, description="Air temperature (C)")
    notes: str | None = Field(default=None, description="Free text notes")
    performed_by: str | None = Field(default=None, description="Sampler name")


class DischargeMonitoring(MeasurementFields):
    """A sample taken at a regulated discharge point.

    Attributes:
        discharge_id: Discharge the sample belongs to
        station_id: Nearest monitoring station, if any
        latitude: Sampling point latitude (8 fractional digits)
        longitude: Sampling point longitude (8 fractional digits)
    """

    discharge_id: int = Field(ge=1, description="Discharge ID")
    station_id: int | None = Field(default=None, ge=1, description="Monitoring station ID")
    latitude: Decimal | None = Field(default=None, ge=-90, le=90, description="Latitude")
    longitude: Decimal | None = Field(default=None, ge=-180, le=180, description="Longitude")
