"""Tests for the wRVU target calculator."""

from __future__ import annotations

import pytest

from prorata.engine.targets import compute_target, compute_targets
from prorata.models.incentives import TargetCalculatorItem

TOTALS = {"clinical": 300_000.0, "admin": 50_000.0}


def test_divides_selected_totals_by_factor():
    item = TargetCalculatorItem(id="t", target_components=["clinical", "admin"], conversion_factor=50)
    assert compute_target(TOTALS, item) == pytest.approx(7000.0)


def test_custom_amount_replaces_totals():
    item = TargetCalculatorItem(id="t", target_components=["clinical"], conversion_factor=50,
                                use_custom_amount=True, custom_amount=100_000)
    assert compute_target(TOTALS, item) == pytest.approx(2000.0)


@pytest.mark.parametrize("components, factor", [(["clinical"], 0), ([], 50), (["research"], 50)])
def test_zero_when_source_or_factor_not_positive(components, factor):
    item = TargetCalculatorItem(id="t", target_components=components, conversion_factor=factor)
    assert compute_target(TOTALS, item) == 0.0


def test_compute_targets_by_id():
    items = [
        TargetCalculatorItem(id="a", target_components=["admin"], conversion_factor=25),
        TargetCalculatorItem(id="b", target_components=["clinical"], conversion_factor=0),
    ]
    assert compute_targets(TOTALS, items) == {"a": pytest.approx(2000.0), "b": 0.0}
