"""Core domain models for the Water Quality Index (ICA).

These models represent the engine's input and output as immutable value
objects, separate from any persisted record shape.

Renaming of fields from the persisted columns:
iod -> oxygen_index
isst -> solids_index
idqo -> demand_index
ice -> conductivity_index
iph -> acidity_index
rnp -> nutrient_ratio
irnp -> nutrient_index
numberIcaVariables -> variable_count
icaCoefficient -> ica_coefficient
qualityClasification -> quality_class
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ica.models.enums import QualityClass


class RawSample(BaseModel):
    """Raw physicochemical measurements for one sample.

    The five core measurements are typed optional so that an absent value can
    be reported as MissingRequiredInput by the engine rather than rejected
    here; nitrogen and phosphorus are genuinely optional.

    Attributes:
        od: Dissolved oxygen (% saturation)
        sst: Total suspended solids (mg/L)
        dqo: Chemical oxygen demand (mg/L)
        ce: Electrical conductivity (uS/cm), must be > 0 to be computable
        ph: Acidity (pH units)
        n: Total nitrogen (mg/L)
        p: Total phosphorus (mg/L)
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    od: Decimal | None = Field(default=None, description="Dissolved oxygen (% saturation)")
    sst: Decimal | None = Field(default=None, description="Total suspended solids (mg/L)")
    dqo: Decimal | None = Field(default=None, description="Chemical oxygen demand (mg/L)")
    ce: Decimal | None = Field(default=None, description="Electrical conductivity (uS/cm)")
    ph: Decimal | None = Field(default=None, description="Acidity (pH units)")
    n: Decimal | None = Field(default=None, description="Total nitrogen (mg/L)")
    p: Decimal | None = Field(default=None, description="Total phosphorus (mg/L)")


class NutrientRatio(BaseModel):
    """Nitrogen/phosphorus ratio and its normalized sub-index.

    Only exists when both nutrients were measured and phosphorus is non-zero.
    """

    model_config = ConfigDict(frozen=True)

    ratio: Decimal = Field(description="Nitrogen / phosphorus")
    index: Decimal = Field(ge=0, le=1, description="Normalized nutrient sub-index")


class IndexSet(BaseModel):
    """Complete set of values derived from one RawSample.

    Produced fresh by ica.engine.compute and never mutated afterwards. The
    caller is responsible for copying it into whatever record it persists.

    Attributes:
        oxygen_index: Dissolved oxygen sub-index
        solids_index: Suspended solids sub-index
        demand_index: Chemical oxygen demand sub-index
        conductivity_index: Conductivity sub-index
        acidity_index: pH sub-index
        nutrient_ratio: N/P ratio (None unless both nutrients are usable)
        nutrient_index: N/P sub-index (present iff nutrient_ratio is)
        variable_count: Number of sub-indices present (5 or 6)
        ica_coefficient: Weighted composite coefficient in [0, 1]
        quality_class: Category of ica_coefficient
    """

    model_config = ConfigDict(frozen=True)

    oxygen_index: Decimal
    solids_index: Decimal
    demand_index: Decimal
    conductivity_index: Decimal
    acidity_index: Decimal
    nutrient_ratio: Decimal | None = None
    nutrient_index: Decimal | None = None
    variable_count: int = Field(ge=5, le=6)
    ica_coefficient: Decimal = Field(ge=0, le=1)
    quality_class: QualityClass

    @model_validator(mode="after")
    def _check_derived_consistency(self) -> "IndexSet":
        has_ratio = self.nutrient_ratio is not None
        has_index = self.nutrient_index is not None
        if has_ratio != has_index:
            msg = "nutrient_ratio and nutrient_index must be both present or both absent"
            raise ValueError(msg)

        expected_count = 6 if has_index else 5
        if self.variable_count != expected_count:
            msg = (
                f"variable_count is {self.variable_count} but {expected_count} "
                "sub-indices are present"
            )
            raise ValueError(msg)
        return self

    @property
    def has_nutrient_ratio(self) -> bool:
        """Check whether the nutrient pair contributed to the coefficient."""
        return self.nutrient_index is not None

    def sub_indices(self) -> dict[str, Decimal | None]:
        """Return the six sub-indices keyed by name, in aggregation order."""
        return {
            "oxygen_index": self.oxygen_index,
            "solids_index": self.solids_index,
            "demand_index": self.demand_index,
            "conductivity_index": self.conductivity_index,
            "acidity_index": self.acidity_index,
            "nutrient_index": self.nutrient_index,
        }
