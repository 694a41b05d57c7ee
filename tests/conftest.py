"""Shared fixtures for building periods and incentives."""

from __future__ import annotations

import pytest

from prorata.models.period import AllocationPeriod


@pytest.fixture
def make_period():
    """Factory for AllocationPeriod with full-year defaults."""

    def _make(
        period_id: str = "p1",
        start: str = "2025-01-01",
        end: str = "2025-12-31",
        base_salary: float = 100_000.0,
        splits: dict | None = None,
    ) -> AllocationPeriod:
        return AllocationPeriod(
            id=period_id,
            start_date=start,
            end_date=end,
            base_salary=base_salary,
            splits={"clinical": 1.0} if splits is None else splits,
        )

    return _make
