"""Total Cash Compensation."""

from __future__ import annotations

from typing import Mapping


def calculate_tcc(totals_by_component: Mapping[str, float],
                  derived_totals: Mapping[str, float]) -> float:
    """Sum of every component total and every derived amount."""
    return sum(totals_by_component.values()) + sum(derived_totals.values())
