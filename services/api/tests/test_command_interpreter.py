from __future__ import annotations

import pytest
from packages.shared.schemas.command import FieldDefinitionV1, FieldTypeV1
from services.api.app.nlp.fields import FieldDictionary, default_field_dictionary
from services.api.app.nlp.interpreter import CommandInterpreter

interpreter = CommandInterpreter()

_SAMPLE_VALUES = {
    FieldTypeV1.TEXT: ("acme", "acme"),
    FieldTypeV1.EMAIL: ("name@example.com", "name@example.com"),
    FieldTypeV1.TEL: ("5551234567", "(555) 123-4567"),
    FieldTypeV1.DATE: ("2024-01-15", "2024-01-15"),
    FieldTypeV1.CURRENCY: ("500", "500"),
}


def _parse(text: str) -> tuple[str, str] | None:
    result = interpreter.interpret(text)
    return None if result is None else (result.field, result.value)


def test_currency_symbol_and_thousands_separator_are_stripped() -> None:
    assert _parse("change the deductible to $2,000") == ("deductible", "2000")


def test_email_dictation() -> None:
    assert _parse("update my email to name at example dot com") == ("email", "name@example.com")


def test_policy_type_synonym() -> None:
    assert _parse("change the policy type to Home Insurance") == ("policyType", "home")


def test_coverage_type_synonym_is_not_captured_by_coverage_amount() -> None:
    assert _parse("set the coverage type to uninsured motorist") == ("coverageType", "uninsured")


def test_unrecognized_command() -> None:
    assert _parse("what time is it") is None


def test_phone_reformatting() -> None:
    assert _parse("set the phone number to 5551234567") == ("phone", "(555) 123-4567")


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "🤖💥 ∑∂ƒ ©˙∆˚¬ 漢字", "\x00\x01"])
def test_blank_and_garbage_input_is_not_understood(text: str) -> None:
    assert interpreter.interpret(text) is None


def test_interpret_is_deterministic() -> None:
    text = "Please change the coverage amount to $250,000 dollars."
    assert interpreter.interpret(text) == interpreter.interpret(text)
    assert _parse(text) == ("coverageAmount", "250000")


def test_every_term_of_every_field_is_recognized() -> None:
    for field in default_field_dictionary():
        if field.type == FieldTypeV1.SELECT:
            spoken = expected = field.options[0]
        else:
            spoken, expected = _SAMPLE_VALUES[field.type]

        for term in field.terms():
            assert _parse(f"update {term} to {spoken}") == (field.id, expected), term


def test_date_is_converted_to_iso() -> None:
    assert _parse("set the start date to January 15, 2024") == ("startDate", "2024-01-15")


def test_unparseable_date_is_kept() -> None:
    assert _parse("set the end date to next summer") == ("endDate", "next summer")


def test_trailing_punctuation_is_removed() -> None:
    assert _parse("Set my last name to Smith.") == ("lastName", "smith")
    assert _parse("set my last name to smith!") == ("lastName", "smith")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("save the policy number as pol-42", ("policyNumber", "pol-42")),
        ("my first name is jane", ("firstName", "jane")),
        ("fill the surname with doe", ("lastName", "doe")),
    ],
)
def test_other_prepositions(text: str, expected: tuple[str, str]) -> None:
    assert _parse(text) == expected


def test_value_directly_after_field_term() -> None:
    assert _parse("make the monthly premium 250 dollars") == ("monthlyPremium", "250")
    assert _parse("phone 555 123 4567") == ("phone", "(555) 123-4567")


def test_value_starting_with_command_verb_is_rejected() -> None:
    assert _parse("first name update please") is None


def test_falls_back_to_text_after_to() -> None:
    assert _parse("for the first name, change it to bob") == ("firstName", "bob")


def test_field_without_value_is_not_understood() -> None:
    assert _parse("update the deductible") is None
    assert _parse("update the deductible to") is None


def test_phone_without_digits_is_not_understood() -> None:
    assert _parse("set the phone to unknown") is None


def test_substring_matching_is_lenient() -> None:
    # "excellent" contains the phone alias "cell".
    assert _parse("excellent, set it to 5551234567") == ("phone", "(555) 123-4567")


def test_unknown_select_value_passes_through() -> None:
    assert _parse("change the policy type to boat") == ("policyType", "boat")


def test_custom_field_dictionary() -> None:
    fields = FieldDictionary(
        [
            FieldDefinitionV1(
                id="vehicleColor",
                display_name="Vehicle Color",
                aliases=("color", "paint"),
            )
        ]
    )
    custom = CommandInterpreter(fields)

    result = custom.interpret("set the paint to red")
    assert result is not None
    assert (result.field, result.value) == ("vehicleColor", "red")
    assert custom.interpret("change the deductible to 500") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("change the deductible to 500, please", ("deductible", "500")),
        ("set the policy type to home, thanks", ("policyType", "home")),
        ("change the deductible to $2,000, thanks", ("deductible", "2000")),
        ("set the start date to march 3, 2025, please", ("startDate", "2025-03-03")),
    ],
)
def test_comma_and_space_ends_the_value(text: str, expected: tuple[str, str]) -> None:
    assert _parse(text) == expected


def test_start_date_without_year_is_kept_as_spoken() -> None:
    assert _parse("set the start date to march 5") == ("startDate", "march 5")


def test_newlines_and_tabs_count_as_spaces() -> None:
    assert _parse("update the first name\nto jane") == ("firstName", "jane")
    assert _parse("set the deductible to\n\t750") == ("deductible", "750")


def test_rejected_commands_print_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    assert interpreter.interpret("what time is it") is None
    assert interpreter.interpret("update the deductible") is None
    assert capsys.readouterr().out == ""
