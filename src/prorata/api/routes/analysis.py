"""Follow-up analysis on computed totals: wRVU targets and market position."""

from __future__ import annotations

from fastapi import APIRouter

from prorata.engine.percentile import calculate_percentile
from prorata.engine.targets import compute_targets
from prorata.models.calculation import PercentileRequest, TargetRequest
from prorata.models.market import PercentileResult

router = APIRouter(tags=["analysis"])


@router.post("/targets")
async def targets(body: TargetRequest) -> dict[str, float]:
    return compute_targets(body.totals_by_component, body.items)


@router.post("/percentile", response_model=PercentileResult, response_model_by_alias=True)
async def percentile(body: PercentileRequest) -> PercentileResult:
    return calculate_percentile(body.current_value, body.market_data)
