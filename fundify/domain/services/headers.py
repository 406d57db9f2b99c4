"""Header mapping from loosely named columns to canonical fields."""

from collections.abc import Sequence
from dataclasses import dataclass
import re

from fundify.domain.exceptions import MissingColumnError
from fundify.domain.models import RawAccountRow, RawTransactionRow
from fundify.domain.services.normalization import normalize_field


_IGNORED_HEADER_CHARS = re.compile(r"[\s_\-.]")

ColumnMap = dict[str, int]


@dataclass(frozen=True)
class FieldSpec:
    """Canonical field and the header spellings it accepts.

    Spellings are compared after :func:`header_key`; earlier spellings take
    precedence when several columns match.
    """

    name: str
    spellings: tuple[str, ...]
    required: bool = False
    label: str = ""


@dataclass(frozen=True)
class HeaderSchema:
    """Set of canonical fields recognized for one kind of file."""

    name: str
    fields: tuple[FieldSpec, ...]


ACCOUNT_PLAN_SCHEMA = HeaderSchema(
    name="account_plan",
    fields=(
        FieldSpec("account_id", ("idconta",), required=True, label="ID_Conta"),
        FieldSpec("nature", ("natureza",)),
        FieldSpec("account_type", ("tipo",)),
        FieldSpec("category", ("categoria",)),
        FieldSpec("subcategory", ("subcategoria",)),
        FieldSpec("name", ("conta",)),
    ),
)

TRANSACTION_SCHEMA = HeaderSchema(
    name="transactions",
    fields=(
        FieldSpec("item_id", ("iditem",)),
        FieldSpec("nature", ("natureza",)),
        FieldSpec("account_type", ("tipo",)),
        FieldSpec("category", ("categoria", "category")),
        FieldSpec("subcategory", ("subcategoria",)),
        FieldSpec("operation", ("operação", "operacao")),
        FieldSpec("origin_destination", ("origemdestino", "origem|destino")),
        FieldSpec("item", ("item",)),
        FieldSpec("date", ("data", "date")),
        FieldSpec("amount", ("valor", "amount")),
        FieldSpec("description", ("description",)),
        FieldSpec("entry_type", ("type",)),
    ),
)


def header_key(cell: str) -> str:
    """Return the comparison key of a header cell."""
    return _IGNORED_HEADER_CHARS.sub("", normalize_field(cell).casefold())


def map_headers(header_row: Sequence[str], schema: HeaderSchema) -> ColumnMap:
    """Resolve the column index of every field of a schema.

    Args:
        header_row: First tokenized row.
        schema: Fields to look for.

    Returns:
        ColumnMap: Field name to column index, -1 when absent.

    Raises:
        MissingColumnError: If a required field has no matching column.
    """
    keys = [header_key(cell) for cell in header_row]
    mapping: ColumnMap = {}
    for field_spec in schema.fields:
        mapping[field_spec.name] = _find_column(keys, field_spec.spellings)
        if field_spec.required and mapping[field_spec.name] == -1:
            raise MissingColumnError(
                field_spec.label or field_spec.name,
                [normalize_field(cell) for cell in header_row],
            )
    return mapping


def _find_column(keys: list[str], spellings: tuple[str, ...]) -> int:
    for spelling in spellings:
        if spelling in keys:
            return keys.index(spelling)
    return -1


def cell_at(values: Sequence[str], index: int) -> str | None:
    """Return the normalized cell at ``index``, None when out of range."""
    if index < 0 or index >= len(values):
        return None
    return normalize_field(values[index])


def build_transaction_row(
    values: Sequence[str],
    mapping: ColumnMap,
) -> RawTransactionRow:
    """Build a raw transaction record from tokenized cells."""
    return RawTransactionRow(
        **{name: cell_at(values, index) for name, index in mapping.items()}
    )


def build_account_row(
    values: Sequence[str],
    mapping: ColumnMap,
) -> RawAccountRow:
    """Build a raw account-plan record from tokenized cells."""
    return RawAccountRow(
        **{name: cell_at(values, index) for name, index in mapping.items()}
    )


def is_blank_row(values: Sequence[str]) -> bool:
    """Return True when every cell of the row is empty."""
    return all(not normalize_field(value) for value in values)


__all__ = [
    "ColumnMap",
    "FieldSpec",
    "HeaderSchema",
    "ACCOUNT_PLAN_SCHEMA",
    "TRANSACTION_SCHEMA",
    "header_key",
    "map_headers",
    "cell_at",
    "build_transaction_row",
    "build_account_row",
    "is_blank_row",
]
