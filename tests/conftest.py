# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations for scorer, models and API

RATE FIXTURE REFERENCE:
- example_rates:        excellent=0.5, high=0.3, good=0.2, average=0.1, low=0.05
- non_descending_rates: excellent=0.1, high=0.5, good=0.2, average=0.2, low=0.05
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.conversion import ConversionScoreRates


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# THRESHOLD FIXTURES
# =============================================================================

@pytest.fixture
def example_rates():
    """Strictly descending rates matching the configured defaults."""
    return ConversionScoreRates(
        excellent=0.5,
        high=0.3,
        good=0.2,
        average=0.1,
        low=0.05,
    )


@pytest.fixture
def non_descending_rates():
    """Misconfigured rates: excellent below high, good equal to average."""
    return ConversionScoreRates(
        excellent=0.1,
        high=0.5,
        good=0.2,
        average=0.2,
        low=0.05,
    )


@pytest.fixture
def example_rates_payload():
    """Example rates as a JSON request fragment."""
    return {
        "excellent": 0.5,
        "high": 0.3,
        "good": 0.2,
        "average": 0.1,
        "low": 0.05,
    }


@pytest.fixture
def partner_rates():
    """One partner per tier plus a negative rate."""
    return {
        "pn_excellent": 0.6,
        "pn_high": 0.5,
        "pn_good": 0.25,
        "pn_average": 0.15,
        "pn_low": 0.07,
        "pn_zero": 0.0,
        "pn_negative": -1.0,
    }
