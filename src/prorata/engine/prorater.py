"""Day-weighted proration of annual salary across tracked components."""

from __future__ import annotations

import logging
from typing import Iterable

from prorata.engine.calendar import day_count_inclusive, days_in_year
from prorata.models.period import AllocationPeriod
from prorata.models.results import ProrationBreakdownRow, ProrationResult

logger = logging.getLogger(__name__)


def derive_component_keys(periods: Iterable[AllocationPeriod]) -> list[str]:
    """Keys with a positive split in at least one period, in first-seen order."""
    keys: dict[str, None] = {}
    for period in periods:
        for key, fte in period.splits.items():
            if fte and fte > 0:
                keys.setdefault(key, None)
    return list(keys)


def prorate(
    periods: Iterable[AllocationPeriod],
    year: int,
    component_keys: Iterable[str],
) -> ProrationResult:
    """Prorate each period's salary into per-component dollar amounts.

    For every tracked key the annual amount (``base_salary * fte``) is turned
    into a daily rate over the target year and multiplied by the period's
    inclusive day count. Keys missing from a period's splits contribute 0.

    ``derived_totals`` is left empty and ``tcc`` holds only the component sum;
    both are completed by the later stages.
    """
    keys = list(dict.fromkeys(component_keys))
    year_days = days_in_year(year)
    totals_by_component: dict[str, float] = {key: 0.0 for key in keys}
    breakdown: list[ProrationBreakdownRow] = []

    for period in periods:
        days = day_count_inclusive(period.start_date, period.end_date)
        component_amounts: dict[str, float] = {}
        total_amount = 0.0

        for key in keys:
            annual_for_component = period.base_salary * period.split_for(key)
            daily_rate = annual_for_component / year_days
            prorated_amount = daily_rate * days

            component_amounts[key] = prorated_amount
            totals_by_component[key] += prorated_amount
            total_amount += prorated_amount

        breakdown.append(ProrationBreakdownRow(
            period_id=period.id,
            start_date=period.start_date,
            end_date=period.end_date,
            days=days,
            base_salary=period.base_salary,
            component_amounts=component_amounts,
            total_amount=total_amount,
        ))

    logger.debug("Prorated %d period(s) over %d component(s) for %d", len(breakdown), len(keys), year)

    return ProrationResult(
        breakdown=breakdown,
        totals_by_component=totals_by_component,
        derived_totals={},
        tcc=sum(totals_by_component.values()),
    )
