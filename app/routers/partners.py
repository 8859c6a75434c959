"""
Partner Conversion Score Router
app/routers/partners.py

Endpoints:
  GET  /api/v1/partners/conversion-score?rate=0.25  — Score one rate with configured thresholds
  POST /api/v1/partners/conversion-score            — Score one rate, optional custom thresholds
  POST /api/v1/partners/conversion-scores           — Score a batch of partners
  GET  /api/v1/partners/conversion-score/rates      — View active thresholds

Rates must be finite. Every scoring response carries `descending`, false when
the thresholds used were not strictly descending.

Register in main.py:
    from app.routers.partners import router as partners_router
    app.include_router(partners_router)
"""

import logging
from typing import Optional, Tuple

from fastapi import APIRouter, HTTPException, Query, status

from app.config import get_settings
from app.core.exceptions import BatchTooLargeException
from app.models.conversion import (
    BatchConversionScoreRequest,
    BatchConversionScoreResponse,
    ConversionScoreRates,
    ConversionScoreRatesResponse,
    ConversionScoreRequest,
    ConversionScoreResponse,
    TierThreshold,
)
from app.scoring.conversion_scorer import (
    check_conversion_score_rates,
    get_conversion_score,
    score_partners,
    summarize_scores,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=get_settings().API_V1_PREFIX, tags=["Partner Conversion Score"])


def _resolve_rates(rates: Optional[ConversionScoreRates]) -> Tuple[ConversionScoreRates, bool]:
    """Pick request rates or configured ones, and whether they are descending."""
    if rates is None:
        # Configured rates were already checked when Settings loaded
        configured = get_settings().conversion_score_rates
        return configured, configured.is_descending()
    return rates, not check_conversion_score_rates(rates)


# =====================================================================
# Endpoints
# =====================================================================

@router.get(
    "/partners/conversion-score",
    response_model=ConversionScoreResponse,
    summary="Score a conversion rate",
)
def get_partner_conversion_score(
    rate: float = Query(..., allow_inf_nan=False, description="Conversion rate"),
):
    rates, descending = _resolve_rates(None)
    score = get_conversion_score(rate, rates)
    return ConversionScoreResponse(
        conversion_rate=rate,
        conversion_score=score,
        rank=score.rank,
        descending=descending,
    )


@router.post(
    "/partners/conversion-score",
    response_model=ConversionScoreResponse,
    summary="Score a conversion rate with optional custom rates",
)
def post_partner_conversion_score(body: ConversionScoreRequest):
    rates, descending = _resolve_rates(body.rates)
    score = get_conversion_score(body.conversion_rate, rates)
    return ConversionScoreResponse(
        conversion_rate=body.conversion_rate,
        conversion_score=score,
        rank=score.rank,
        descending=descending,
    )


@router.post(
    "/partners/conversion-scores",
    response_model=BatchConversionScoreResponse,
    responses={413: {"description": "Too many partners in one request"}},
    summary="Score a batch of partner conversion rates",
)
def post_partner_conversion_scores(body: BatchConversionScoreRequest):
    try:
        scores = score_partners(
            body.partners,
            max_batch_size=get_settings().MAX_BATCH_SIZE,
            rates=body.rates,
        )
    except BatchTooLargeException as e:
        logger.warning(f"Rejected batch: {e}")
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))

    _, descending = _resolve_rates(body.rates)
    return BatchConversionScoreResponse(
        scores=scores,
        summary=summarize_scores(scores),
        count=len(scores),
        descending=descending,
    )


@router.get(
    "/partners/conversion-score/rates",
    response_model=ConversionScoreRatesResponse,
    summary="View active conversion score rates",
)
def get_conversion_score_rates():
    rates = get_settings().conversion_score_rates
    return ConversionScoreRatesResponse(
        rates=rates,
        tiers=[TierThreshold(label=label, threshold=threshold) for threshold, label in rates.tiers()],
        descending=rates.is_descending(),
    )
