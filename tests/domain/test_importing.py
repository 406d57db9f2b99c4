"""Tests for row partitioning and account-plan parsing."""

from datetime import date
from decimal import Decimal

import pytest

from fundify.domain.constants import INCOME
from fundify.domain.exceptions import MissingColumnError
from fundify.domain.models import Account
from fundify.domain.services.importing import (
    build_chart,
    parse_account_rows,
    partition_rows,
    row_number_for,
)


TODAY = date(2024, 6, 1)


def test_row_numbers_count_the_header() -> None:
    """The first data row is line 2 of the file."""
    assert row_number_for(0) == 2
    assert row_number_for(1) == 3


def test_partition_accepts_legacy_headers() -> None:
    """Legacy english headers should import like the current ones."""
    rows = [
        ["date", "Item", "Valor", "Natureza"],
        ["15/01/2024", "Salário", "5000", "Receita"],
    ]

    partition = partition_rows(rows, {}, True, today=TODAY)

    assert partition.diagnostics == []
    assert len(partition.accepted) == 1
    transaction = partition.accepted[0]
    assert transaction.date == "2024-01-15"
    assert transaction.amount == Decimal("5000")
    assert transaction.entry_type == INCOME
    assert transaction.category == "Outros"


def test_partition_reports_unknown_accounts_with_row_number() -> None:
    """Unknown Id_Item values should be diagnosed on their own line."""
    chart = {"7": Account(account_id="7", category="Utilidades")}
    rows = [
        ["Id_Item", "Item", "Valor"],
        ["7", "Luz", "280"],
        ["99", "Água", "80"],
    ]

    partition = partition_rows(rows, chart, True, today=TODAY)

    assert [t.description for t in partition.accepted] == ["Luz"]
    assert len(partition.diagnostics) == 1
    diagnostic = partition.diagnostics[0]
    assert diagnostic.row_number == 3
    assert "99" in diagnostic.reason
    assert diagnostic.payload == ("99", "Água", "80")


def test_partition_without_validation_accepts_unknown_accounts() -> None:
    """Validation off should accept every structurally valid row."""
    rows = [
        ["Id_Item", "Item", "Valor"],
        ["99", "Água", "80"],
    ]

    partition = partition_rows(rows, {}, False, today=TODAY)

    assert len(partition.accepted) == 1
    assert partition.diagnostics == []


def test_partition_skips_blank_and_zero_rows() -> None:
    """Blank rows are ignored and zero amounts become notices."""
    rows = [
        ["Data", "Item", "Valor"],
        ["", "", ""],
        ["2024-02-01", "Saldo", "0"],
        ["2024-02-02", "Uber", "35"],
    ]

    partition = partition_rows(rows, {}, True, today=TODAY)

    assert len(partition.accepted) == 1
    assert partition.diagnostics == []
    assert partition.notices == ["Row 3: skipped, amount is zero"]
    assert partition.row_count == 3


def test_partition_diagnoses_structurally_empty_rows() -> None:
    """Short rows and rows without amount or description are errors."""
    rows = [
        ["Data", "Item", "Valor", "Categoria"],
        ["2024-02-01"],
        ["2024-02-01", "", "", "Casa"],
    ]

    partition = partition_rows(rows, {}, True, today=TODAY)

    assert partition.accepted == []
    assert [d.row_number for d in partition.diagnostics] == [2, 3]
    assert "too few columns" in partition.diagnostics[0].reason


def test_partition_keeps_sign_consistent_with_type() -> None:
    """Every accepted amount carries the sign of its entry type."""
    rows = [
        ["Item", "Valor", "Natureza", "Operação"],
        ["Salário", "-5000", "Receita", ""],
        ["Aluguel", "1500", "Despesa", ""],
        ["Reembolso", "-40", "", "Entrada"],
        ["Mercado", "-210,50", "", ""],
    ]

    partition = partition_rows(rows, {}, True, today=TODAY)

    assert len(partition.accepted) == 4
    for transaction in partition.accepted:
        if transaction.entry_type == INCOME:
            assert transaction.amount > 0
        else:
            assert transaction.amount < 0


def test_partition_of_header_only_file_is_empty() -> None:
    """A header with no data rows yields nothing."""
    partition = partition_rows([["Item", "Valor"]], {}, True)

    assert partition.accepted == []
    assert partition.row_count == 0


def test_parse_account_rows_skips_rows_without_id() -> None:
    """Rows with an empty ID_Conta are skipped with a note."""
    rows = [
        ["ID_Conta", "Natureza", "Tipo", "Categoria", "Subcategoria", "Conta"],
        ["7", "Despesa", "Fixa", "Utilidades", "Energia", "Conta de Luz"],
        ["", "Despesa", "Fixa", "Casa", "", "Sem id"],
        ["10", "Receita", "Fixa", "Trabalho", "Salários", "Salário"],
    ]

    accounts, notes = parse_account_rows(rows)

    assert [a.account_id for a in accounts] == ["7", "10"]
    assert accounts[0].name == "Conta de Luz"
    assert accounts[0].subcategory == "Energia"
    assert notes == ["Row 3: skipped, empty ID_Conta"]


def test_parse_account_rows_requires_id_column() -> None:
    """An account plan without an ID_Conta column is rejected."""
    with pytest.raises(MissingColumnError) as exc_info:
        parse_account_rows([["Conta", "Categoria"], ["Luz", "Casa"]])

    assert exc_info.value.column == "ID_Conta"


def test_build_chart_keeps_last_duplicate() -> None:
    """Later entries replace earlier entries with the same id."""
    chart = build_chart(
        [
            Account(account_id="7", category="Casa"),
            Account(account_id="7", category="Utilidades"),
        ]
    )

    assert chart["7"].category == "Utilidades"


def test_partition_skips_out_of_range_amounts_and_keeps_other_rows() -> None:
    """An amount beyond the Decimal range is skipped, not fatal."""
    rows = [
        ["Item", "Valor", "Data"],
        ["A", "1E+1000000", "2024-01-01"],
        ["B", "10", "2024-01-02"],
    ]

    partition = partition_rows(rows, {}, True, today=TODAY)

    assert [t.description for t in partition.accepted] == ["B"]
    assert partition.diagnostics == []
    assert partition.notices == [
        'Row 2: skipped, Amount "1E+1000000" is not numeric; using 0'
    ]
