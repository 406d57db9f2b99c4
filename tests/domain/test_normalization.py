"""Tests for per-value normalization."""

from datetime import date
from decimal import Decimal

import pytest

from fundify.domain.services.normalization import (
    normalize_field,
    normalize_text,
    parse_amount,
    parse_date,
)


TODAY = date(2024, 3, 9)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "Salário",
        "Salário",
        "  \x07Conta\x1f de Luz\x85 ",
        "�Alimenta�ção",
        " espaço ",
        " ́ ",
        "linha\tcom\ttabs",
        "Ｆｕｌｌ width",
    ],
)
def test_normalize_field_is_idempotent(raw: str) -> None:
    """Normalizing twice should equal normalizing once."""
    once = normalize_field(raw)

    assert normalize_field(once) == once


def test_normalize_field_composes_and_strips_controls() -> None:
    """Decomposed accents compose to NFC and control characters vanish."""
    assert normalize_field("  Sala\u0301rio\x00\x9f ") == "Sal\u00e1rio"


def test_normalize_field_handles_absent_values() -> None:
    """None should normalize to an empty string without warning."""
    result = normalize_text(None)

    assert result.value == ""
    assert result.warning is None


def test_normalize_field_removes_replacement_markers() -> None:
    """Replacement markers left by lossy decoding should be dropped."""
    assert normalize_field("Alimenta��o") == "Alimentao"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("5000", Decimal("5000")),
        ("450,50", Decimal("450.50")),
        ("450.50", Decimal("450.50")),
        ("1.234,56", Decimal("1234.56")),
        ("1,234.56", Decimal("1234.56")),
        ("R$ -35,00", Decimal("-35.00")),
        (" 12 ", Decimal("12")),
    ],
)
def test_parse_amount_accepts_both_decimal_marks(raw, expected) -> None:
    """Dot and comma decimal marks should coerce to the same value."""
    result = parse_amount(raw)

    assert result.value == expected
    assert result.warning is None


def test_parse_amount_empty_is_zero_without_warning() -> None:
    """Empty amounts are zero and not reported."""
    assert parse_amount("").value == Decimal("0")
    assert parse_amount(None).warning is None


@pytest.mark.parametrize(
    "raw",
    ["abc", "NaN", "Infinity", "1,2,3", "1E+1000000", "-2e-1000000"],
)
def test_parse_amount_invalid_falls_back_to_zero(raw) -> None:
    """Non-numeric amounts should become zero with a warning."""
    result = parse_amount(raw)

    assert result.value == Decimal("0")
    assert result.substituted


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-01-15", "2024-01-15"),
        ("15/01/2024", "2024-01-15"),
        ("5/1/2024", "2024-01-05"),
        ("05/1/2024", "2024-01-05"),
    ],
)
def test_parse_date_accepts_iso_and_day_first(raw, expected) -> None:
    """ISO dates pass through and D/M/YYYY is rewritten zero-padded."""
    result = parse_date(raw, today=TODAY)

    assert result.value == expected
    assert result.warning is None


@pytest.mark.parametrize("raw", ["", None, "ontem", "31/02/2024", "2024-13-01"])
def test_parse_date_falls_back_to_today(raw) -> None:
    """Missing and invalid dates should become today with a warning."""
    result = parse_date(raw, today=TODAY)

    assert result.value == "2024-03-09"
    assert result.substituted
