"""
Custom Exceptions - Partner Conversion Score Service
app/core/exceptions.py

Custom exception classes for threshold configuration and batch scoring.
"""

from typing import List


class ConversionScoreException(Exception):
    """Base exception for conversion scoring."""

    pass


class ThresholdConfigurationException(ConversionScoreException):
    """Threshold configuration is missing one or more tiers."""

    def __init__(self, missing_keys: List[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(
            f"Conversion score rates missing required tiers: {', '.join(self.missing_keys)}"
        )


class BatchTooLargeException(ConversionScoreException):
    """Batch scoring request exceeds the configured limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Batch of {size} partners exceeds limit of {limit}")
