"""Configuration and constants for the ICA (Water Quality Index) engine.

This module defines the fixed numeric policy of the index and the few
behaviours that can be switched per deployment.

Includes configuration for:
- Decimal precision contexts and storage scales (PrecisionConstants)
- Engine behaviour switches (IcaConfig with ICA_ prefix)
- CSV output column names (OutputColumns)

Configuration can be overridden via:
1. Environment variables (e.g., ICA_REJECT_ZERO_PHOSPHORUS=true)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class PrecisionConstants:
    """Decimal contexts and storage scales used by every ICA calculation.

    These are NOT configurable - the values reported to the regulator depend
    on them bit-for-bit.

    Sub-index formulas run in an 11 significant digit context. The weighted
    aggregate runs in a separate 3 significant digit context; the two must
    never be merged into a single global rounding mode.

    All attributes are immutable (frozen=True prevents modification).
    """

    # Significant digits, not decimal places
    SUB_INDEX_PRECISION: int = 11
    COEFFICIENT_PRECISION: int = 3

    # Fractional digits of the persisted columns
    INDEX_SCALE: Decimal = Decimal("0.001")
    COEFFICIENT_SCALE: Decimal = Decimal("0.01")
    FLOW_SCALE: Decimal = Decimal("0.01")
    COORDINATE_SCALE: Decimal = Decimal("0.00000001")

    ROUNDING: str = ROUND_HALF_UP

    def sub_index_context(self) -> Context:
        """Build a fresh 11 significant digit HALF_UP context.

        Contexts accumulate signal flags, so each caller gets its own.
        """
        return Context(prec=self.SUB_INDEX_PRECISION, rounding=self.ROUNDING)

    def coefficient_context(self) -> Context:
        """Build a fresh 3 significant digit HALF_UP context for the aggregate."""
        return Context(prec=self.COEFFICIENT_PRECISION, rounding=self.ROUNDING)


# Module-level singleton for precision constants
CONSTANTS = PrecisionConstants()


class IcaConfig(BaseSettings):
    """Behaviour switches for the ICA engine.

    Can be overridden via environment variables with ICA_ prefix:
    - ICA_REJECT_ZERO_PHOSPHORUS

    Attributes:
        reject_zero_phosphorus: Raise InvalidDomainValue when phosphorus is 0
            instead of leaving the nutrient ratio absent
    """

    model_config = SettingsConfigDict(
        env_prefix="ICA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    reject_zero_phosphorus: bool = Field(
        default=False,
        description="Treat phosphorus == 0 as a domain error rather than an absent ratio",
    )


DEFAULT_CONFIG = IcaConfig()


class OutputColumns:
    """Column names in the ICA results CSV."""

    SAMPLE_ID = "sample_id"
    OD = "od"
    SST = "sst"
    DQO = "dqo"
    CE = "ce"
    PH = "ph"
    N = "n"
    P = "p"
    RNP = "rnp"
    IOD = "iod"
    ISST = "isst"
    IDQO = "idqo"
    ICE = "ice"
    IPH = "iph"
    IRNP = "irnp"
    NUMBER_ICA_VARIABLES = "number_ica_variables"
    ICA_COEFFICIENT = "ica_coefficient"
    QUALITY_CLASSIFICATION = "quality_classification"
    ERROR = "error"

    @classmethod
    def raw_fields(cls) -> list[str]:
        """Get the raw measurement columns in input order."""
        return [cls.OD, cls.SST, cls.DQO, cls.CE, cls.PH, cls.N, cls.P]

    @classmethod
    def derived_fields(cls) -> list[str]:
        """Get the columns produced by the engine."""
        return [
            cls.RNP,
            cls.IOD,
            cls.ISST,
            cls.IDQO,
            cls.ICE,
            cls.IPH,
            cls.IRNP,
            cls.NUMBER_ICA_VARIABLES,
            cls.ICA_COEFFICIENT,
            cls.QUALITY_CLASSIFICATION,
        ]

    @classmethod
    def final_output_order(cls) -> list[str]:
        """Get the ordered list of columns for final CSV output."""
        return [cls.SAMPLE_ID, *cls.raw_fields(), *cls.derived_fields()]
