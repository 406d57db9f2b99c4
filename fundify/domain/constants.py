"""Domain constants for the import pipeline and aggregates."""

INCOME = "income"
EXPENSE = "expense"

# Substrings that mark a nature/operation value as income.
INCOME_VOCABULARY = (
    "receita",
    "entrada",
    "income",
)

DEFAULT_CATEGORY = "Outros"

DEFAULT_ENCODINGS = (
    "utf-8",
    "cp1252",
    "iso-8859-1",
)

# Accented letters of the Portuguese alphabet.
ACCENTED_LETTERS = frozenset("áàâãéêíóôõúçÁÀÂÃÉÊÍÓÔÕÚÇ")

PRIMARY_DELIMITER = ","
SECONDARY_DELIMITER = ";"
QUOTE_CHAR = '"'

MONTH_LABELS = (
    "Jan",
    "Fev",
    "Mar",
    "Abr",
    "Mai",
    "Jun",
    "Jul",
    "Ago",
    "Set",
    "Out",
    "Nov",
    "Dez",
)

DEBUG_SAMPLE_SIZE = 3


__all__ = [
    "INCOME",
    "EXPENSE",
    "INCOME_VOCABULARY",
    "DEFAULT_CATEGORY",
    "DEFAULT_ENCODINGS",
    "ACCENTED_LETTERS",
    "PRIMARY_DELIMITER",
    "SECONDARY_DELIMITER",
    "QUOTE_CHAR",
    "MONTH_LABELS",
    "DEBUG_SAMPLE_SIZE",
]
