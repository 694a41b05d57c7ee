"""Validation and proration output models."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import Field

from prorata.core.types import TotalsMap
from prorata.models.base import CamelModel


class ValidationErrorType(StrEnum):
    DATE = "date"
    FTE = "fte"
    OVERLAP = "overlap"
    GENERAL = "general"


class PeriodValidationError(CamelModel):
    """A single advisory problem found in the inputs."""

    type: ValidationErrorType
    message: str
    period_id: Optional[str] = None


# Name used by the calculator front end for the same record.
ValidationError = PeriodValidationError


class ValidationResult(CamelModel):
    ok: bool = True
    errors: list[PeriodValidationError] = Field(default_factory=list)


class ProrationBreakdownRow(CamelModel):
    """Per-period proration detail."""

    period_id: str
    start_date: date
    end_date: date
    days: int
    base_salary: float
    component_amounts: TotalsMap = Field(default_factory=dict)
    total_amount: float = 0.0


class ProrationResult(CamelModel):
    """Breakdown rows in input order plus component, derived and TCC totals."""

    breakdown: list[ProrationBreakdownRow] = Field(default_factory=list)
    totals_by_component: TotalsMap = Field(default_factory=dict)
    derived_totals: TotalsMap = Field(default_factory=dict)
    tcc: float = 0.0
