"""
scoring/ — Partner Conversion Scoring

Modules:
    conversion_scorer.py  - Conversion rate → tier classification
"""

from app.scoring.conversion_scorer import (
    check_conversion_score_rates,
    get_conversion_score,
    score_partners,
    summarize_scores,
)

__all__ = [
    "check_conversion_score_rates",
    "get_conversion_score",
    "score_partners",
    "summarize_scores",
]
