"""Position a compensation or productivity value within market percentiles.

Survey values are scaled by the provider's FTE, then the value is linearly
interpolated inside the band it falls in (0-25, 25-50, 50-75, 75-90). Above
the 90th percentile the 75-90 slope is extended at 10 points per band width
and capped at 99.
"""

from __future__ import annotations

from prorata.core.exceptions import InvalidMarketDataError
from prorata.models.market import MarketData, PercentilePosition, PercentileResult

MAX_PERCENTILE = 99.0

_DESCRIPTIONS = {
    PercentilePosition.BELOW_25: "Below 25th percentile",
    PercentilePosition.P25_50: "25th to 50th percentile",
    PercentilePosition.P50_75: "50th to 75th percentile",
    PercentilePosition.P75_90: "75th to 90th percentile",
    PercentilePosition.ABOVE_90: "Above 90th percentile",
}


def _band_fraction(value: float, low: float, high: float) -> float:
    return (value - low) / (high - low)


def calculate_percentile(current_value: float, market_data: MarketData) -> PercentileResult:
    """Interpolate where ``current_value`` sits against ``market_data``.

    Raises:
        InvalidMarketDataError: unless the FTE-scaled percentiles satisfy
            ``0 < p25 < p50 < p75 < p90``.
    """
    user_fte = market_data.user_fte or 1.0
    pct = market_data.percentiles
    p25, p50, p75, p90 = (v * user_fte for v in (pct.p25, pct.p50, pct.p75, pct.p90))
    if not 0 < p25 < p50 < p75 < p90:
        raise InvalidMarketDataError(
            "Market percentiles must be positive and strictly increasing "
            f"(got p25={p25}, p50={p50}, p75={p75}, p90={p90})"
        )

    next_percentile: int | None
    gap_to_next: float | None

    if current_value < p25:
        position = PercentilePosition.BELOW_25
        percentile = _band_fraction(current_value, 0.0, p25) * 25
        next_percentile, gap_to_next = 25, p25 - current_value
    elif current_value < p50:
        position = PercentilePosition.P25_50
        percentile = 25 + _band_fraction(current_value, p25, p50) * 25
        next_percentile, gap_to_next = 50, p50 - current_value
    elif current_value < p75:
        position = PercentilePosition.P50_75
        percentile = 50 + _band_fraction(current_value, p50, p75) * 25
        next_percentile, gap_to_next = 75, p75 - current_value
    elif current_value < p90:
        position = PercentilePosition.P75_90
        percentile = 75 + _band_fraction(current_value, p75, p90) * 15
        next_percentile, gap_to_next = 90, p90 - current_value
    else:
        position = PercentilePosition.ABOVE_90
        percentile = min(90 + _band_fraction(current_value, p90, p90 + (p90 - p75)) * 10,
                         MAX_PERCENTILE)
        next_percentile, gap_to_next = None, None

    return PercentileResult(
        current_value=current_value,
        percentile=round(percentile, 1),
        position=position,
        market_data=market_data,
        next_percentile=next_percentile,
        gap_to_next=gap_to_next,
    )


def position_description(position: PercentilePosition) -> str:
    return _DESCRIPTIONS[position]
