from __future__ import annotations

import pytest
from services.api.app.nlp.fields import default_field_dictionary
from services.api.app.nlp.normalize import (
    normalize_currency,
    normalize_date,
    normalize_email,
    normalize_phone,
    normalize_value,
)

fields = default_field_dictionary()


def test_phone_formatting_is_idempotent() -> None:
    once = normalize_phone("555.123.4567")
    assert once == "(555) 123-4567"
    assert normalize_phone(once) == once


def test_phone_with_other_digit_counts_keeps_digits_only() -> None:
    assert normalize_phone("123-4567") == "1234567"
    assert normalize_phone("+1 555 123 4567") == "15551234567"


def test_email_dictation_is_case_insensitive() -> None:
    assert normalize_email("jane AT example DOT co dot uk") == "jane@example.co.uk"
    assert normalize_email("jane@example.com") == "jane@example.com"


def test_date_normalization() -> None:
    assert normalize_date("march 3 2025") == "2025-03-03"
    assert normalize_date("2025-03-03") == "2025-03-03"
    assert normalize_date("sometime soon") == "sometime soon"


def test_currency_normalization() -> None:
    assert normalize_currency("$1,500") == "1500"
    assert normalize_currency("300 dollars") == "300"
    assert normalize_currency("2000") == "2000"


def test_select_synonyms_are_field_specific() -> None:
    policy_type = fields.get("policyType")
    coverage_type = fields.get("coverageType")
    assert policy_type is not None and coverage_type is not None

    assert normalize_value(policy_type, "house") == "home"
    assert normalize_value(policy_type, "Auto") == "auto"
    assert normalize_value(coverage_type, "uninsured motorist") == "uninsured"
    assert normalize_value(coverage_type, "house") == "house"


def test_text_only_strips_one_trailing_punctuation_mark() -> None:
    first_name = fields.get("firstName")
    assert first_name is not None
    assert normalize_value(first_name, "jane?") == "jane"
    assert normalize_value(first_name, "o'brien") == "o'brien"


@pytest.mark.parametrize("value", ["5", "march 5", "monday", "march 2024", "the 15th"])
def test_partial_dates_are_not_completed_from_today(value: str) -> None:
    assert normalize_date(value) == value
