"""Incentive definitions evaluated after proration."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, model_validator

from prorata.core.types import ComponentKey
from prorata.models.base import FrozenCamelModel
from prorata.parsing.currency import parse_currency


class DerivedItem(FrozenCamelModel):
    """An incentive computed from prorated component totals.

    Percentage mode applies ``percent_of_source`` to the summed totals of the
    comma-separated ``source_component`` keys, then the optional floor and cap.
    Productivity mode (``is_wrvu_incentive``) pays ``wrvu_conversion_factor``
    per wRVU produced above ``target_wrvus``.
    """

    id: str
    name: str = ""

    # --- Percentage mode ---
    source_component: str = ""
    percent_of_source: float = 0.0
    floor: Optional[float] = None
    cap: Optional[float] = None

    # --- Productivity (wRVU) mode ---
    is_wrvu_incentive: bool = False
    actual_wrvus: Optional[float] = None
    actual_wrvus_str: Optional[str] = None
    target_wrvus: Optional[float] = None
    wrvu_conversion_factor: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _wrvus_from_display_string(cls, data: Any) -> Any:
        if isinstance(data, dict) and "actualWrvus" not in data and "actual_wrvus" not in data:
            raw = data.get("actualWrvusStr", data.get("actual_wrvus_str"))
            if raw:
                data = {**data, "actual_wrvus": parse_currency(raw)}
        return data

    @property
    def source_keys(self) -> list[str]:
        """Trimmed, non-empty keys named in ``source_component``."""
        return [token.strip() for token in self.source_component.split(",") if token.strip()]

    @property
    def uses_wrvu_mode(self) -> bool:
        return (
            self.is_wrvu_incentive
            and self.actual_wrvus is not None
            and self.target_wrvus is not None
            and self.wrvu_conversion_factor is not None
        )


class TargetCalculatorItem(FrozenCamelModel):
    """Converts a dollar amount into a wRVU target via a conversion factor."""

    id: str
    name: str = ""
    target_components: list[ComponentKey] = Field(default_factory=list)
    conversion_factor: float = 0.0
    conversion_factor_str: Optional[str] = None
    use_custom_amount: bool = False
    custom_amount: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _factor_from_display_string(cls, data: Any) -> Any:
        if isinstance(data, dict) and "conversionFactor" not in data and "conversion_factor" not in data:
            raw = data.get("conversionFactorStr", data.get("conversion_factor_str"))
            if raw:
                data = {**data, "conversion_factor": parse_currency(raw)}
        return data
