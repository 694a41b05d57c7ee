"""Tests for input model parsing."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from prorata.engine.targets import compute_target
from prorata.models import results
from prorata.models.incentives import DerivedItem, TargetCalculatorItem
from prorata.models.period import AllocationPeriod
from prorata.models.results import PeriodValidationError, ValidationErrorType


class TestAllocationPeriod:
    def test_accepts_camel_case_payload(self):
        period = AllocationPeriod.model_validate({
            "id": "a",
            "startDate": "2025-01-01",
            "endDate": "2025-08-24",
            "baseSalary": 1529264.25,
            "splits": {"clinical": 0.8},
        })
        assert period.start_date == date(2025, 1, 1)
        assert period.end_date == date(2025, 8, 24)
        assert period.base_salary == 1529264.25

    def test_rejects_malformed_date(self):
        with pytest.raises(ValidationError):
            AllocationPeriod(id="a", start_date="2025-02-30", end_date="2025-03-01")

    def test_rejects_timestamp_numbers(self):
        with pytest.raises(ValidationError):
            AllocationPeriod(id="a", start_date=1735689600, end_date="2025-03-01")

    def test_salary_falls_back_to_display_string(self):
        period = AllocationPeriod.model_validate({
            "id": "a",
            "startDate": "2025-01-01",
            "endDate": "2025-12-31",
            "baseSalaryStr": "$2,150,000.00",
        })
        assert period.base_salary == 2150000.0

    def test_numeric_salary_wins_over_display_string(self):
        period = AllocationPeriod.model_validate({
            "id": "a",
            "startDate": "2025-01-01",
            "endDate": "2025-12-31",
            "baseSalary": 10.0,
            "baseSalaryStr": "$99",
        })
        assert period.base_salary == 10.0

    def test_missing_and_none_splits_read_as_zero(self, make_period):
        period = make_period(splits={"clinical": None, "admin": 0.2})
        assert period.split_for("clinical") == 0.0
        assert period.split_for("research") == 0.0
        assert period.defined_splits == [0.2]

    def test_is_frozen(self, make_period):
        period = make_period()
        with pytest.raises(ValidationError):
            period.base_salary = 1.0

    def test_rejects_blank_component_key(self):
        with pytest.raises(ValidationError):
            AllocationPeriod(id="a", start_date="2025-01-01", end_date="2025-01-02",
                             splits={"  ": 0.5})


class TestDerivedItem:
    def test_source_keys_trims_and_drops_empty_tokens(self):
        item = DerivedItem(id="d", source_component=" clinical, admin ,,")
        assert item.source_keys == ["clinical", "admin"]

    def test_wrvu_mode_requires_all_fields(self):
        item = DerivedItem(id="d", is_wrvu_incentive=True, actual_wrvus=10, target_wrvus=5)
        assert item.uses_wrvu_mode is False

    def test_actual_wrvus_from_display_string(self):
        item = DerivedItem.model_validate({"id": "d", "actualWrvusStr": "7,250.5"})
        assert item.actual_wrvus == 7250.5


class TestTargetCalculatorItem:
    def test_conversion_factor_from_display_string(self):
        item = TargetCalculatorItem.model_validate({
            "id": "t",
            "targetComponents": ["clinical"],
            "conversionFactorStr": "50",
        })
        assert item.conversion_factor == 50.0
        assert compute_target({"clinical": 500_000.0}, item) == pytest.approx(10_000.0)

    def test_numeric_factor_wins_over_display_string(self):
        item = TargetCalculatorItem.model_validate({
            "id": "t", "conversionFactor": 45.5, "conversionFactorStr": "50",
        })
        assert item.conversion_factor == 45.5

    def test_missing_factor_defaults_to_zero(self):
        assert TargetCalculatorItem(id="t").conversion_factor == 0.0


def test_validation_error_dumps_camel_case():
    error = PeriodValidationError(type=ValidationErrorType.DATE, message="bad", period_id="p1")
    assert error.model_dump(by_alias=True, mode="json") == {
        "type": "date",
        "message": "bad",
        "periodId": "p1",
    }


def test_front_end_name_refers_to_period_validation_error():
    assert results.ValidationError is PeriodValidationError
