"""wRVU target calculator: dollars divided by a conversion factor."""

from __future__ import annotations

from typing import Iterable, Mapping

from prorata.models.incentives import TargetCalculatorItem


def target_source_amount(totals_by_component: Mapping[str, float],
                         item: TargetCalculatorItem) -> float:
    if item.use_custom_amount:
        return item.custom_amount
    return sum(totals_by_component.get(key, 0.0) for key in item.target_components)


def compute_target(totals_by_component: Mapping[str, float], item: TargetCalculatorItem) -> float:
    """wRVUs needed to justify the selected dollars; 0 unless both inputs are positive."""
    source = target_source_amount(totals_by_component, item)
    if source > 0 and item.conversion_factor > 0:
        return source / item.conversion_factor
    return 0.0


def compute_targets(
    totals_by_component: Mapping[str, float],
    items: Iterable[TargetCalculatorItem],
) -> dict[str, float]:
    return {item.id: compute_target(totals_by_component, item) for item in items}
