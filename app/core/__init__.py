"""
Core Package - Partner Conversion Score Service
app/core/__init__.py

Core infrastructure: exceptions, error responses, logging.
"""

from app.core.exceptions import (
    BatchTooLargeException,
    ConversionScoreException,
    ThresholdConfigurationException,
)
from app.core.errors import error_response, validation_exception_handler
from app.core.logging import configure_logging

__all__ = [
    # Exceptions
    "BatchTooLargeException",
    "ConversionScoreException",
    "ThresholdConfigurationException",
    # Error responses
    "error_response",
    "validation_exception_handler",
    # Logging
    "configure_logging",
]
