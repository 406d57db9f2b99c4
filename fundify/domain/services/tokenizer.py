"""Delimited-text tokenizer tolerant of both comma and semicolon files."""

from fundify.domain.constants import (
    PRIMARY_DELIMITER,
    QUOTE_CHAR,
    SECONDARY_DELIMITER,
)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def detect_delimiter(
    text: str,
    primary: str = PRIMARY_DELIMITER,
    secondary: str = SECONDARY_DELIMITER,
) -> str:
    """Choose the delimiter from the first line only.

    Args:
        text: Text with normalized line endings.
        primary: Delimiter used unless the secondary one appears.
        secondary: Delimiter preferred when present on the first line.

    Returns:
        str: Selected delimiter.
    """
    first_line = text.split("\n", 1)[0]
    return secondary if secondary in first_line else primary


def split_line(line: str, delimiter: str, quote: str = QUOTE_CHAR) -> list[str]:
    """Split one line into trimmed fields.

    Quoted sections may contain the delimiter; a doubled quote inside a
    quoted section is a literal quote. A trailing delimiter yields an empty
    trailing field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == quote:
            if in_quotes and index + 1 < length and line[index + 1] == quote:
                current.append(quote)
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        index += 1
    fields.append("".join(current).strip())
    return fields


def tokenize(
    text: str,
    primary: str = PRIMARY_DELIMITER,
    secondary: str = SECONDARY_DELIMITER,
    quote: str = QUOTE_CHAR,
) -> list[list[str]]:
    """Split text into rows of trimmed fields, skipping blank lines.

    Args:
        text: Decoded file content.
        primary: Default field delimiter.
        secondary: Delimiter used when present on the first line.
        quote: Quote character.

    Returns:
        list[list[str]]: Rows in file order.
    """
    normalized = normalize_line_endings(text)
    delimiter = detect_delimiter(normalized, primary, secondary)
    return [
        split_line(line, delimiter, quote)
        for line in normalized.split("\n")
        if line.strip()
    ]


__all__ = [
    "normalize_line_endings",
    "detect_delimiter",
    "split_line",
    "tokenize",
]
