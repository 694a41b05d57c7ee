"""Incentive amounts derived from prorated component totals."""

from __future__ import annotations

from typing import Iterable, Mapping

from prorata.models.incentives import DerivedItem


def compute_derived_amount(totals_by_component: Mapping[str, float], item: DerivedItem) -> float:
    """Dollar amount for a single incentive.

    Productivity mode needs all three wRVU fields; otherwise the item falls
    back to percentage mode. Floor and cap are applied in that order, so a
    cap below the floor wins.
    """
    if item.uses_wrvu_mode:
        excess = item.actual_wrvus - item.target_wrvus
        if excess <= 0:
            return 0.0
        return item.wrvu_conversion_factor * excess

    base = sum(totals_by_component.get(key, 0.0) for key in item.source_keys)
    amount = base * (item.percent_of_source / 100)

    if item.floor is not None and amount < item.floor:
        amount = item.floor
    if item.cap is not None and amount > item.cap:
        amount = item.cap
    return amount


def compute_derived(
    totals_by_component: Mapping[str, float],
    derived_items: Iterable[DerivedItem],
) -> dict[str, float]:
    """Map each item id to its amount. Items never feed one another."""
    return {item.id: compute_derived_amount(totals_by_component, item) for item in derived_items}
