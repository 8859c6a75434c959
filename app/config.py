"""Application configuration with comprehensive validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.conversion import ConversionScoreRates
from app.scoring.conversion_scorer import check_conversion_score_rates


class Settings(BaseSettings):
    """Application settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Partner Conversion Score Service"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # API
    API_V1_PREFIX: str = "/api/v1"
    MAX_BATCH_SIZE: int = Field(default=1000, ge=1, le=10000)

    # Conversion Score Rates (exclusive lower bound per tier)
    CONVERSION_SCORE_RATE_EXCELLENT: float = Field(default=0.5, ge=0)
    CONVERSION_SCORE_RATE_HIGH: float = Field(default=0.3, ge=0)
    CONVERSION_SCORE_RATE_GOOD: float = Field(default=0.2, ge=0)
    CONVERSION_SCORE_RATE_AVERAGE: float = Field(default=0.1, ge=0)
    CONVERSION_SCORE_RATE_LOW: float = Field(default=0.05, ge=0)

    @model_validator(mode="after")
    def validate_conversion_score_rates(self):
        """Flag non-descending rates; reject them outright in production."""
        out_of_order = check_conversion_score_rates(self.conversion_score_rates)
        if out_of_order and self.APP_ENV == "production":
            pairs = ", ".join(f"{a.value} <= {b.value}" for a, b in out_of_order)
            raise ValueError(f"Conversion score rates must be strictly descending, got {pairs}")
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production has safe settings."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self

    @property
    def conversion_score_rates(self) -> ConversionScoreRates:
        """Get conversion score rates as a threshold set."""
        return ConversionScoreRates(
            excellent=self.CONVERSION_SCORE_RATE_EXCELLENT,
            high=self.CONVERSION_SCORE_RATE_HIGH,
            good=self.CONVERSION_SCORE_RATE_GOOD,
            average=self.CONVERSION_SCORE_RATE_AVERAGE,
            low=self.CONVERSION_SCORE_RATE_LOW,
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
