"""Character-encoding inference for uploaded files."""

from collections.abc import Sequence

from fundify.domain.constants import ACCENTED_LETTERS, DEFAULT_ENCODINGS
from fundify.domain.models import EncodingResolution


REPLACEMENT_CHAR = "\ufffd"

_UTF8_BOM = b"\xef\xbb\xbf"
_UTF16_LE_BOM = b"\xff\xfe"
_UTF16_BE_BOM = b"\xfe\xff"


def resolve_encoding(
    payload: bytes,
    encodings: Sequence[str] = DEFAULT_ENCODINGS,
) -> EncodingResolution:
    """Decode a raw payload with the best-fitting candidate encoding.

    A UTF-8 byte-order mark is dropped before scoring; UTF-16 marks decide
    the encoding on their own. Each candidate is decoded with replacement
    enabled and scored by its number of replacement markers. A decode with
    no marker and at least one accented letter wins immediately; otherwise
    the lowest score wins and ties keep the earlier candidate.

    Args:
        payload: Raw bytes as uploaded.
        encodings: Ordered candidate codec names.

    Returns:
        EncodingResolution: Decoded text and the codec that produced it.
    """
    if payload.startswith(_UTF16_LE_BOM):
        return _decode_utf16(payload[2:], "utf-16-le")
    if payload.startswith(_UTF16_BE_BOM):
        return _decode_utf16(payload[2:], "utf-16-be")

    bom = None
    body = payload
    if payload.startswith(_UTF8_BOM):
        bom = "utf-8"
        body = payload[3:]

    best: EncodingResolution | None = None
    for encoding in encodings:
        try:
            text = body.decode(encoding, errors="replace")
        except LookupError:
            continue
        score = text.count(REPLACEMENT_CHAR)
        if best is None or score < best.replacement_count:
            best = EncodingResolution(
                text=text,
                encoding=encoding,
                replacement_count=score,
                bom=bom,
            )
        if score == 0 and _has_accented_letter(text):
            return EncodingResolution(
                text=text,
                encoding=encoding,
                replacement_count=0,
                bom=bom,
            )

    if best is None:
        text = body.decode("utf-8", errors="replace")
        return EncodingResolution(
            text=text,
            encoding="utf-8",
            replacement_count=text.count(REPLACEMENT_CHAR),
            bom=bom,
        )
    return best


def decode_payload(
    payload: bytes,
    encodings: Sequence[str] = DEFAULT_ENCODINGS,
) -> str:
    """Return only the text of :func:`resolve_encoding`."""
    return resolve_encoding(payload, encodings).text


def _decode_utf16(body: bytes, encoding: str) -> EncodingResolution:
    text = body.decode(encoding, errors="replace")
    return EncodingResolution(
        text=text,
        encoding=encoding,
        replacement_count=text.count(REPLACEMENT_CHAR),
        bom=encoding,
    )


def _has_accented_letter(text: str) -> bool:
    return any(char in ACCENTED_LETTERS for char in text)


__all__ = ["REPLACEMENT_CHAR", "resolve_encoding", "decode_payload"]
