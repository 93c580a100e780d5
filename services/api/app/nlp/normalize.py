from __future__ import annotations

import re
from datetime import datetime

from dateutil import parser as date_parser

from packages.shared.schemas.command import FieldDefinitionV1, FieldTypeV1

_TRAILING_PUNCT = re.compile(r"[.!?]$")
_SPOKEN_AT = re.compile(r"\s+at\s+", re.IGNORECASE)
_SPOKEN_DOT = re.compile(r"\s+dot\s+", re.IGNORECASE)
_NON_DIGIT = re.compile(r"\D")
_DOLLARS_WORD = re.compile(r"\bdollars?\b", re.IGNORECASE)

_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def normalize_value(field: FieldDefinitionV1, value: str) -> str:
    """Clean up a raw value phrase according to the field's type.

    Never raises; values that cannot be improved are returned as-is.
    """

    value = _TRAILING_PUNCT.sub("", value.strip()).strip()

    if field.type == FieldTypeV1.EMAIL:
        return normalize_email(value)
    if field.type == FieldTypeV1.TEL:
        return normalize_phone(value)
    if field.type == FieldTypeV1.DATE:
        return normalize_date(value)
    if field.type == FieldTypeV1.CURRENCY:
        return normalize_currency(value)
    if field.type == FieldTypeV1.SELECT:
        return normalize_select(field, value)
    return value


def normalize_email(value: str) -> str:
    value = _SPOKEN_AT.sub("@", value)
    value = _SPOKEN_DOT.sub(".", value)
    return value


def normalize_phone(value: str) -> str:
    digits = _NON_DIGIT.sub("", value)
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    return digits


def normalize_date(value: str) -> str:
    """ISO date for a fully specified date, otherwise the value unchanged.

    Parsing against two different defaults exposes any part (year, month, day or a
    weekday like "monday") that dateutil would fill in, so results never depend on
    the current date.
    """
    try:
        first = date_parser.parse(value, default=_DEFAULT_A)
        second = date_parser.parse(value, default=_DEFAULT_B)
    except (ValueError, OverflowError):
        return value
    if first.date() != second.date():
        return value
    return first.date().isoformat()


def normalize_currency(value: str) -> str:
    value = value.strip()
    if value.startswith("$"):
        value = value[1:]
    value = _DOLLARS_WORD.sub("", value)
    # Thousands separators: "2,000" -> "2000".
    value = value.replace(",", "")
    return value.strip()


def normalize_select(field: FieldDefinitionV1, value: str) -> str:
    key = value.strip().lower()
    if key in field.synonyms:
        return field.synonyms[key]
    if key in field.options:
        return key
    return value
