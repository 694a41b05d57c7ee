"""Calculation endpoints: full TCC run and validation only."""

from __future__ import annotations

from fastapi import APIRouter, Request

from prorata.engine.pipeline import TCCCalculator
from prorata.models.calculation import CalculationRequest, CalculationResponse, ValidationRequest
from prorata.models.results import ValidationResult

router = APIRouter(tags=["calculations"])


def _calculator(request: Request) -> TCCCalculator:
    return request.app.state.calculator


@router.post("", response_model=CalculationResponse, response_model_by_alias=True)
async def calculate(body: CalculationRequest, request: Request) -> CalculationResponse:
    """Prorate periods and return totals, incentives, TCC and targets."""
    return _calculator(request).calculate(body)


@router.post("/validate", response_model=ValidationResult, response_model_by_alias=True)
async def validate(body: ValidationRequest, request: Request) -> ValidationResult:
    """Run the advisory checks without computing amounts."""
    return _calculator(request).validate(body.periods, body.year)
