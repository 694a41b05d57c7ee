"""Tests for component key and currency input helpers."""

from __future__ import annotations

import pytest

from prorata.parsing.currency import parse_currency
from prorata.parsing.keys import normalize_key, title_case


class TestNormalizeKey:
    @pytest.mark.parametrize("label, expected", [
        ("Clinical", "clinical"),
        ("Medical Directorship", "medicalDirectorship"),
        ("Call-Coverage  Pay!", "callcoveragePay"),
        ("  Admin time ", "adminTime"),
        ("Admin time ", "adminTime"),
    ])
    def test_labels(self, label, expected):
        assert normalize_key(label) == expected


class TestTitleCase:
    def test_splits_camel_case(self):
        assert title_case("medicalDirectorship") == "Medical Directorship"

    def test_single_word(self):
        assert title_case("clinical") == "Clinical"


class TestParseCurrency:
    @pytest.mark.parametrize("raw, expected", [
        ("$1,529,264.25", 1529264.25),
        ("2150000", 2150000.0),
        ("$ 12.5 USD", 12.5),
        ("1.2.3", 1.2),
        ("-50", 50.0),
        ("", 0.0),
        ("n/a", 0.0),
    ])
    def test_values(self, raw, expected):
        assert parse_currency(raw) == expected
