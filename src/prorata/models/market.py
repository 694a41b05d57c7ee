"""Market survey data and percentile positioning results."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from prorata.models.base import CamelModel, FrozenCamelModel


class PercentilePosition(StrEnum):
    BELOW_25 = "below_25"
    P25_50 = "25_50"
    P50_75 = "50_75"
    P75_90 = "75_90"
    ABOVE_90 = "above_90"


class MarketPercentiles(FrozenCamelModel):
    p25: float
    p50: float
    p75: float
    p90: float


class MarketData(FrozenCamelModel):
    """Survey benchmark for one specialty, stated at ``fte`` (usually 1.0)."""

    id: str = ""
    name: str = ""
    specialty: str = ""
    year: Optional[int] = None
    fte: float = 1.0
    user_fte: float = 1.0  # scales the survey values to the provider's effort
    percentiles: MarketPercentiles


class PercentileResult(CamelModel):
    current_value: float
    percentile: float
    position: PercentilePosition
    market_data: MarketData
    next_percentile: Optional[int] = None
    gap_to_next: Optional[float] = None
