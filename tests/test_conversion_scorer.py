# tests/test_conversion_scorer.py

"""
Conversion Scorer Tests - tier classification, batch scoring, rate checks
"""

import math

import pytest

from app.core.exceptions import BatchTooLargeException
from app.models.conversion import ConversionScoreRates
from app.models.enumerations import PartnerConversionScore
from app.scoring.conversion_scorer import (
    check_conversion_score_rates,
    get_conversion_score,
    score_partners,
    summarize_scores,
)



# CLASSIFICATION TESTS


class TestGetConversionScore:
    """Tests for get_conversion_score()."""

    @pytest.mark.parametrize(
        "rate, expected",
        [
            (0.6, PartnerConversionScore.EXCELLENT),
            (0.5, PartnerConversionScore.HIGH),
            (0.25, PartnerConversionScore.GOOD),
            (0.15, PartnerConversionScore.AVERAGE),
            (0.07, PartnerConversionScore.LOW),
            (0.0, PartnerConversionScore.UNKNOWN),
            (-1, PartnerConversionScore.UNKNOWN),
        ],
    )
    def test_example_rates(self, example_rates, rate, expected):
        assert get_conversion_score(rate, example_rates) == expected

    def test_rate_equal_to_threshold_falls_to_next_tier(self, example_rates):
        """Comparison is strictly greater-than."""
        assert get_conversion_score(0.3, example_rates) == PartnerConversionScore.GOOD
        assert get_conversion_score(0.2, example_rates) == PartnerConversionScore.AVERAGE
        assert get_conversion_score(0.1, example_rates) == PartnerConversionScore.LOW
        assert get_conversion_score(0.05, example_rates) == PartnerConversionScore.UNKNOWN

    def test_rate_above_one_is_excellent(self, example_rates):
        assert get_conversion_score(3.2, example_rates) == PartnerConversionScore.EXCELLENT

    def test_nan_is_unknown(self, example_rates):
        assert get_conversion_score(math.nan, example_rates) == PartnerConversionScore.UNKNOWN

    def test_positive_infinity_is_excellent(self, example_rates):
        assert get_conversion_score(math.inf, example_rates) == PartnerConversionScore.EXCELLENT

    def test_negative_infinity_is_unknown(self, example_rates):
        assert get_conversion_score(-math.inf, example_rates) == PartnerConversionScore.UNKNOWN

    def test_integer_rate_accepted(self, example_rates):
        assert get_conversion_score(1, example_rates) == PartnerConversionScore.EXCELLENT

    def test_defaults_to_configured_rates(self):
        """Default settings use the same cutoffs as example_rates."""
        assert get_conversion_score(0.25) == PartnerConversionScore.GOOD
        assert get_conversion_score(0.5) == PartnerConversionScore.HIGH

    def test_returns_plain_string_value(self, example_rates):
        score = get_conversion_score(0.6, example_rates)
        assert score == "excellent"
        assert isinstance(score, str)

    def test_non_descending_rates_use_first_match(self, non_descending_rates):
        """Misordered rates are not corrected; the first tier exceeded wins."""
        # 0.3 > excellent(0.1) even though it is below high(0.5)
        assert get_conversion_score(0.3, non_descending_rates) == PartnerConversionScore.EXCELLENT
        # 0.08 clears only low
        assert get_conversion_score(0.08, non_descending_rates) == PartnerConversionScore.LOW

    def test_does_not_log_or_mutate_rates(self, example_rates, caplog):
        before = example_rates.model_dump()
        get_conversion_score(0.25, example_rates)
        assert example_rates.model_dump() == before
        assert caplog.records == []



# BATCH SCORING TESTS


class TestScorePartners:
    """Tests for score_partners() and summarize_scores()."""

    def test_scores_each_partner(self, example_rates, partner_rates):
        scores = score_partners(partner_rates, example_rates)
        assert scores == {
            "pn_excellent": PartnerConversionScore.EXCELLENT,
            "pn_high": PartnerConversionScore.HIGH,
            "pn_good": PartnerConversionScore.GOOD,
            "pn_average": PartnerConversionScore.AVERAGE,
            "pn_low": PartnerConversionScore.LOW,
            "pn_zero": PartnerConversionScore.UNKNOWN,
            "pn_negative": PartnerConversionScore.UNKNOWN,
        }

    def test_empty_batch(self, example_rates):
        assert score_partners({}, example_rates) == {}

    def test_batch_matches_single_scoring(self, example_rates, partner_rates):
        scores = score_partners(partner_rates, example_rates)
        for partner_id, rate in partner_rates.items():
            assert scores[partner_id] == get_conversion_score(rate, example_rates)

    def test_batch_limit_exceeded(self, example_rates, partner_rates):
        with pytest.raises(BatchTooLargeException) as exc_info:
            score_partners(partner_rates, example_rates, max_batch_size=3)
        assert exc_info.value.size == len(partner_rates)
        assert exc_info.value.limit == 3

    def test_batch_limit_inclusive(self, example_rates, partner_rates):
        scores = score_partners(partner_rates, example_rates, max_batch_size=len(partner_rates))
        assert len(scores) == len(partner_rates)

    def test_summary_counts(self, example_rates, partner_rates):
        summary = summarize_scores(score_partners(partner_rates, example_rates))
        assert summary[PartnerConversionScore.EXCELLENT] == 1
        assert summary[PartnerConversionScore.LOW] == 1
        assert summary[PartnerConversionScore.UNKNOWN] == 2
        assert sum(summary.values()) == len(partner_rates)

    def test_summary_is_zero_filled_in_tier_order(self):
        summary = summarize_scores({"pn_1": PartnerConversionScore.GOOD})
        assert list(summary) == [
            PartnerConversionScore.EXCELLENT,
            PartnerConversionScore.HIGH,
            PartnerConversionScore.GOOD,
            PartnerConversionScore.AVERAGE,
            PartnerConversionScore.LOW,
            PartnerConversionScore.UNKNOWN,
        ]
        assert summary[PartnerConversionScore.GOOD] == 1
        assert summary[PartnerConversionScore.HIGH] == 0



# RATE CHECK TESTS


class TestCheckConversionScoreRates:
    """Tests for check_conversion_score_rates()."""

    def test_descending_rates_pass(self, example_rates):
        assert check_conversion_score_rates(example_rates) == []

    def test_reports_out_of_order_pairs(self, non_descending_rates):
        assert check_conversion_score_rates(non_descending_rates) == [
            (PartnerConversionScore.EXCELLENT, PartnerConversionScore.HIGH),
            (PartnerConversionScore.GOOD, PartnerConversionScore.AVERAGE),
        ]

    def test_equal_thresholds_are_out_of_order(self):
        rates = ConversionScoreRates(excellent=0.3, high=0.3, good=0.2, average=0.1, low=0.0)
        assert check_conversion_score_rates(rates) == [
            (PartnerConversionScore.EXCELLENT, PartnerConversionScore.HIGH),
        ]

    def test_check_does_not_reorder(self, non_descending_rates):
        check_conversion_score_rates(non_descending_rates)
        assert non_descending_rates.excellent == 0.1
        assert non_descending_rates.high == 0.5
