"""Tests for header mapping."""

import pytest

from fundify.domain.exceptions import MissingColumnError
from fundify.domain.services.headers import (
    ACCOUNT_PLAN_SCHEMA,
    TRANSACTION_SCHEMA,
    build_transaction_row,
    header_key,
    is_blank_row,
    map_headers,
)


def test_header_key_ignores_case_spaces_and_underscores() -> None:
    """Header comparison keys should fold case and drop separators."""
    assert header_key(" ID_Conta ") == "idconta"
    assert header_key("Id Item") == "iditem"
    assert header_key("Sub-Categoria") == "subcategoria"


def test_account_plan_headers_map_to_indexes() -> None:
    """Known account-plan columns should resolve; others are -1."""
    mapping = map_headers(
        ["Id Conta", "NATUREZA", "Categoria", "Conta"],
        ACCOUNT_PLAN_SCHEMA,
    )

    assert mapping == {
        "account_id": 0,
        "nature": 1,
        "account_type": -1,
        "category": 2,
        "subcategory": -1,
        "name": 3,
    }


def test_missing_account_id_names_the_headers_seen() -> None:
    """A missing ID_Conta column should fail the whole submission."""
    with pytest.raises(MissingColumnError) as excinfo:
        map_headers(["Conta", "Categoria"], ACCOUNT_PLAN_SCHEMA)

    assert excinfo.value.column == "ID_Conta"
    assert "Conta, Categoria" in str(excinfo.value)


def test_transaction_synonyms_prefer_portuguese_spelling() -> None:
    """Data should win over the legacy date column."""
    mapping = map_headers(
        ["date", "Data", "Operação", "Origem|Destino", "amount"],
        TRANSACTION_SCHEMA,
    )

    assert mapping["date"] == 1
    assert mapping["operation"] == 2
    assert mapping["origin_destination"] == 3
    assert mapping["amount"] == 4
    assert mapping["item_id"] == -1


def test_operation_accepts_unaccented_spelling() -> None:
    """Operacao without accents should match the operation field."""
    mapping = map_headers(["Operacao"], TRANSACTION_SCHEMA)

    assert mapping["operation"] == 0


def test_build_transaction_row_marks_absent_and_short_cells() -> None:
    """Absent columns and cells past the row end should be None."""
    mapping = map_headers(["Item", "Valor", "Data"], TRANSACTION_SCHEMA)

    row = build_transaction_row(["Luz", " 280 "], mapping)

    assert row.item == "Luz"
    assert row.amount == "280"
    assert row.date is None
    assert row.nature is None


def test_is_blank_row() -> None:
    """Rows of empty cells should be blank."""
    assert is_blank_row(["", "  ", ""])
    assert not is_blank_row(["", "x"])
