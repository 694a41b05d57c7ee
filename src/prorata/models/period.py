"""Allocation period: one contiguous span with a salary basis and FTE splits."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from prorata.core.types import SplitMap
from prorata.engine.calendar import parse_date
from prorata.models.base import FrozenCamelModel
from prorata.parsing.currency import parse_currency


class AllocationPeriod(FrozenCamelModel):
    """A calendar span during which salary is split across named components."""

    id: str
    start_date: date
    end_date: date
    base_salary: float = 0.0
    splits: SplitMap = Field(default_factory=dict)

    # --- Passthrough fields kept for the entry form; never read by the engine ---
    base_salary_str: Optional[str] = None
    comp_salary_override: Optional[float] = None
    comp_salary_str: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _salary_from_display_string(cls, data: Any) -> Any:
        # Form payloads may carry only the typed "$1,234.56" string.
        if isinstance(data, dict) and "baseSalary" not in data and "base_salary" not in data:
            raw = data.get("baseSalaryStr", data.get("base_salary_str"))
            if raw:
                data = {**data, "base_salary": parse_currency(raw)}
        return data

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _calendar_date(cls, value: Any) -> date:
        return parse_date(value)

    def split_for(self, key: str) -> float:
        """FTE fraction for ``key``; absent and unset splits count as 0."""
        return self.splits.get(key) or 0.0

    @property
    def defined_splits(self) -> list[float]:
        """Split values that are actually set."""
        return [v for v in self.splits.values() if v is not None]
