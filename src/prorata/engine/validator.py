"""Advisory input validation.

Problems are collected and returned; nothing here raises, and the rest of the
pipeline runs on the same inputs regardless of what is reported.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable, Optional

from prorata.core.config import AppSettings, EngineConfig
from prorata.engine.calendar import overlaps
from prorata.models.period import AllocationPeriod
from prorata.models.results import PeriodValidationError, ValidationErrorType, ValidationResult

logger = logging.getLogger(__name__)


def _period_errors(period: AllocationPeriod, index: int, year: int,
                   check_fte_sum: bool) -> list[PeriodValidationError]:
    errors: list[PeriodValidationError] = []
    label = f"Period {index + 1}"

    if period.start_date > period.end_date:
        errors.append(PeriodValidationError(
            type=ValidationErrorType.DATE,
            message=f"{label}: Start date must be before end date",
            period_id=period.id,
        ))

    if period.start_date.year != year or period.end_date.year != year:
        errors.append(PeriodValidationError(
            type=ValidationErrorType.DATE,
            message=f"{label}: Dates must be within year {year}",
            period_id=period.id,
        ))

    fte_values = period.defined_splits
    for fte in fte_values:
        if fte < 0 or fte > 1:
            errors.append(PeriodValidationError(
                type=ValidationErrorType.FTE,
                message=f"{label}: FTE values must be between 0 and 1",
                period_id=period.id,
            ))

    if check_fte_sum and sum(fte_values) > 1:
        errors.append(PeriodValidationError(
            type=ValidationErrorType.FTE,
            message=f"{label}: Total FTE cannot exceed 100%",
            period_id=period.id,
        ))

    return errors


def _overlap_errors(periods: list[AllocationPeriod]) -> list[PeriodValidationError]:
    errors: list[PeriodValidationError] = []
    for (i, a), (j, b) in combinations(enumerate(periods), 2):
        if overlaps(a.start_date, a.end_date, b.start_date, b.end_date):
            errors.append(PeriodValidationError(
                type=ValidationErrorType.OVERLAP,
                message=f"Periods {i + 1} and {j + 1}: Date ranges overlap",
                period_id=b.id,
            ))
    return errors


def validate_inputs(
    periods: Iterable[AllocationPeriod],
    year: int,
    *,
    check_fte_sum: Optional[bool] = None,
    check_overlaps: Optional[bool] = None,
    settings: AppSettings | None = None,
) -> ValidationResult:
    """Check date order, year containment and FTE bounds for every period.

    The FTE-sum and overlap checks are off unless enabled here or through
    ``EngineConfig``; explicit arguments win over configuration.
    """
    config = settings.engine if settings is not None else EngineConfig()
    if check_fte_sum is None:
        check_fte_sum = config.check_fte_sum
    if check_overlaps is None:
        check_overlaps = config.check_overlaps

    periods = list(periods)
    errors: list[PeriodValidationError] = []
    for index, period in enumerate(periods):
        errors.extend(_period_errors(period, index, year, check_fte_sum))

    if check_overlaps:
        errors.extend(_overlap_errors(periods))

    if errors:
        logger.debug("Validation found %d issue(s) across %d period(s)", len(errors), len(periods))

    return ValidationResult(ok=not errors, errors=errors)
