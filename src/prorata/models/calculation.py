"""Request/response envelopes for a full TCC calculation."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from prorata.core.types import ComponentKey, TotalsMap
from prorata.models.base import CamelModel
from prorata.models.incentives import DerivedItem, TargetCalculatorItem
from prorata.models.market import MarketData
from prorata.models.period import AllocationPeriod
from prorata.models.results import ProrationResult, ValidationResult


class CalculationRequest(CamelModel):
    """Everything the engine needs for one calendar year.

    When ``component_keys`` is omitted, every key with a positive split in
    any period is tracked.
    """

    year: int
    periods: list[AllocationPeriod] = Field(default_factory=list)
    component_keys: Optional[list[ComponentKey]] = None
    derived_items: list[DerivedItem] = Field(default_factory=list)
    target_items: list[TargetCalculatorItem] = Field(default_factory=list)


class CalculationResponse(CamelModel):
    validation: ValidationResult
    component_keys: list[ComponentKey]
    result: ProrationResult
    targets: TotalsMap = Field(default_factory=dict)


class ValidationRequest(CamelModel):
    year: int
    periods: list[AllocationPeriod] = Field(default_factory=list)


class TargetRequest(CamelModel):
    totals_by_component: TotalsMap = Field(default_factory=dict)
    items: list[TargetCalculatorItem] = Field(default_factory=list)


class PercentileRequest(CamelModel):
    current_value: float
    market_data: MarketData
