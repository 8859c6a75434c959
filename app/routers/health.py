"""
Health Check Router - Partner Conversion Score Service
app/routers/health.py

Liveness check. The service has no external dependencies, so it also
reports whether the configured conversion score rates are descending.
"""
from fastapi import APIRouter
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

from app.config import get_settings

router = APIRouter(tags=["Health"])



#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    checks: Dict[str, str]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service status and configuration checks.",
)
def health_check():
    """Report service status."""
    settings = get_settings()
    rates_ok = settings.conversion_score_rates.is_descending()

    return HealthResponse(
        status="healthy" if rates_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        checks={
            "conversion_score_rates": "descending" if rates_ok else "not descending",
        },
    )
