"""Tests for the delimited-text tokenizer."""

from fundify.domain.services.tokenizer import (
    detect_delimiter,
    split_line,
    tokenize,
)


def test_semicolon_on_first_line_wins() -> None:
    """The secondary delimiter should win when on the first line."""
    assert detect_delimiter("a;b\nc,d") == ";"
    assert detect_delimiter("a,b\nc;d") == ","


def test_tokenize_normalizes_line_endings_and_skips_blank_lines() -> None:
    """CRLF and CR endings should split rows; blank lines are dropped."""
    text = "Data;Valor\r\n15/01/2024;10\r\n\r\n   \r16/01/2024;20\n"

    rows = tokenize(text)

    assert rows == [
        ["Data", "Valor"],
        ["15/01/2024", "10"],
        ["16/01/2024", "20"],
    ]


def test_quotes_protect_delimiters_and_escape_themselves() -> None:
    """Quoted delimiters and doubled quotes should be honored."""
    line = '1,"Supermercado, centro","Diz ""oi""", 45.5 '

    assert split_line(line, ",") == [
        "1",
        "Supermercado, centro",
        'Diz "oi"',
        "45.5",
    ]


def test_trailing_delimiter_keeps_empty_field() -> None:
    """A lone trailing delimiter should yield an empty last field."""
    assert split_line("a;b;", ";") == ["a", "b", ""]


def test_fields_are_trimmed() -> None:
    """Whitespace around fields should be removed."""
    assert tokenize(" Item , Valor \n  Luz ,  280 ") == [
        ["Item", "Valor"],
        ["Luz", "280"],
    ]
