from enum import Enum

class PartnerConversionScore(str, Enum):
    EXCELLENT = "excellent"
    HIGH = "high"
    GOOD = "good"
    AVERAGE = "average"
    LOW = "low"
    UNKNOWN = "unknown"      # Rate did not clear the lowest threshold

    @property
    def rank(self) -> int:
        """Tier position, 0 for unknown up to 5 for excellent."""
        return PARTNER_CONVERSION_SCORES.index(self)


# Ascending tier order
PARTNER_CONVERSION_SCORES = [
    PartnerConversionScore.UNKNOWN,
    PartnerConversionScore.LOW,
    PartnerConversionScore.AVERAGE,
    PartnerConversionScore.GOOD,
    PartnerConversionScore.HIGH,
    PartnerConversionScore.EXCELLENT,
]
