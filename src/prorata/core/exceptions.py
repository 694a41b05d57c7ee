"""Prorata exception hierarchy."""

from __future__ import annotations


class ProrataError(Exception):
    """Base exception for all prorata errors."""


class InvalidDateError(ProrataError, ValueError):
    """A date value could not be read as a calendar date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid calendar date {value!r}; expected YYYY-MM-DD")


class InvalidMarketDataError(ProrataError, ValueError):
    """Market percentiles cannot be interpolated (empty or inverted band)."""


class CalculationError(ProrataError):
    """A pipeline stage failed unexpectedly."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage!r} failed: {message}")
