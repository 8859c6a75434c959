# app/scoring/conversion_scorer.py
"""
Conversion Scorer
-----------------
Maps a partner conversion rate to a qualitative tier.

Algorithm:
    Walk the (threshold, label) pairs from excellent down to low and return
    the first label whose threshold the rate strictly exceeds. A rate that
    clears none of them is 'unknown'.

Default rates (Settings, overridable via env):
    excellent  > 0.50
    high       > 0.30
    good       > 0.20
    average    > 0.10
    low        > 0.05

Comparisons are strict, so a rate equal to a threshold falls to the next
tier down. NaN compares false against everything and lands on 'unknown'.
Non-descending rates are classified in first-match order as given; use
check_conversion_score_rates() to surface them.
"""
import structlog
from collections import Counter
from typing import Dict, List, Mapping, Optional, Tuple

from app.core.exceptions import BatchTooLargeException
from app.models.conversion import ConversionScoreRates
from app.models.enumerations import PartnerConversionScore, PARTNER_CONVERSION_SCORES

logger = structlog.get_logger(__name__)


def get_conversion_score(
    conversion_rate: float,
    rates: Optional[ConversionScoreRates] = None,
) -> PartnerConversionScore:
    """
    Args:
        conversion_rate: Any real number. No bounds are enforced.
        rates: Tier thresholds. Defaults to the configured rates.

    Returns:
        The first tier whose threshold conversion_rate strictly exceeds,
        or PartnerConversionScore.UNKNOWN.
    """
    if rates is None:
        rates = _default_rates()

    for threshold, label in rates.tiers():
        if conversion_rate > threshold:
            return label
    return PartnerConversionScore.UNKNOWN


def score_partners(
    rates_by_partner: Mapping[str, float],
    rates: Optional[ConversionScoreRates] = None,
    max_batch_size: Optional[int] = None,
) -> Dict[str, PartnerConversionScore]:
    """
    Score every partner independently against the same rates.

    Raises:
        BatchTooLargeException: if max_batch_size is set and exceeded.
    """
    if max_batch_size is not None and len(rates_by_partner) > max_batch_size:
        raise BatchTooLargeException(len(rates_by_partner), max_batch_size)

    if rates is None:
        rates = _default_rates()

    scores = {
        partner_id: get_conversion_score(rate, rates)
        for partner_id, rate in rates_by_partner.items()
    }

    logger.info(
        "partners_scored",
        count=len(scores),
        summary={label.value: n for label, n in summarize_scores(scores).items() if n},
    )
    return scores


def summarize_scores(
    scores: Mapping[str, PartnerConversionScore],
) -> Dict[PartnerConversionScore, int]:
    """Count partners per tier, excellent first, zero-filled."""
    counts = Counter(scores.values())
    return {label: counts.get(label, 0) for label in reversed(PARTNER_CONVERSION_SCORES)}


def check_conversion_score_rates(
    rates: ConversionScoreRates,
) -> List[Tuple[PartnerConversionScore, PartnerConversionScore]]:
    """
    Find adjacent tiers whose thresholds are not strictly descending.

    Returns the offending (upper, lower) label pairs and logs a warning when
    there are any. The rates are never reordered.
    """
    tiers = rates.tiers()
    out_of_order = [
        (upper_label, lower_label)
        for (upper, upper_label), (lower, lower_label) in zip(tiers, tiers[1:])
        if not upper > lower
    ]

    if out_of_order:
        logger.warning(
            "conversion_score_rates_not_descending",
            rates=rates.model_dump(),
            out_of_order=[f"{a.value}<={b.value}" for a, b in out_of_order],
        )
    return out_of_order


def _default_rates() -> ConversionScoreRates:
    from app.config import get_settings

    return get_settings().conversion_score_rates
