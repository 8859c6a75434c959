from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Dict, List, Mapping, Optional, Tuple

from app.core.exceptions import ThresholdConfigurationException
from app.models.enumerations import PartnerConversionScore


class ConversionScoreRates(BaseModel):
    """
    Exclusive lower bounds for each conversion score tier.

    Expected to be strictly descending from excellent to low. The order is
    not enforced here; see check_conversion_score_rates().
    """

    model_config = ConfigDict(frozen=True)

    excellent: float = Field(..., description="Rate must exceed this to be 'excellent'")
    high: float = Field(..., description="Rate must exceed this to be 'high'")
    good: float = Field(..., description="Rate must exceed this to be 'good'")
    average: float = Field(..., description="Rate must exceed this to be 'average'")
    low: float = Field(..., description="Rate must exceed this to be 'low'")

    def tiers(self) -> List[Tuple[float, PartnerConversionScore]]:
        """(threshold, label) pairs in comparison order, excellent first."""
        return [
            (self.excellent, PartnerConversionScore.EXCELLENT),
            (self.high, PartnerConversionScore.HIGH),
            (self.good, PartnerConversionScore.GOOD),
            (self.average, PartnerConversionScore.AVERAGE),
            (self.low, PartnerConversionScore.LOW),
        ]

    def is_descending(self) -> bool:
        thresholds = [threshold for threshold, _ in self.tiers()]
        return all(a > b for a, b in zip(thresholds, thresholds[1:]))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "ConversionScoreRates":
        """
        Build rates from a plain mapping such as a parsed config file.

        Raises:
            ThresholdConfigurationException: if any tier key is missing.
        """
        missing = [key for key in TIER_KEYS if key not in mapping]
        if missing:
            raise ThresholdConfigurationException(missing)
        return cls(**{key: mapping[key] for key in TIER_KEYS})


TIER_KEYS = ["excellent", "high", "good", "average", "low"]


# =====================================================================
# API Schemas
# =====================================================================

FiniteRate = Annotated[float, Field(allow_inf_nan=False)]


class ConversionScoreRequest(BaseModel):
    conversion_rate: float = Field(..., allow_inf_nan=False)
    rates: Optional[ConversionScoreRates] = None


class ConversionScoreResponse(BaseModel):
    conversion_rate: float
    conversion_score: PartnerConversionScore
    rank: int = Field(..., ge=0, le=5)
    descending: bool = True


class BatchConversionScoreRequest(BaseModel):
    partners: Dict[str, FiniteRate] = Field(
        ...,
        description="Mapping of partner ID to conversion rate"
    )
    rates: Optional[ConversionScoreRates] = None


class BatchConversionScoreResponse(BaseModel):
    scores: Dict[str, PartnerConversionScore]
    summary: Dict[PartnerConversionScore, int]
    count: int
    descending: bool = True


class TierThreshold(BaseModel):
    label: PartnerConversionScore
    threshold: float


class ConversionScoreRatesResponse(BaseModel):
    rates: ConversionScoreRates
    tiers: List[TierThreshold]
    descending: bool
