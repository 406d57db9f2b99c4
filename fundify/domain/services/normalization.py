"""Tolerant per-value normalization of imported cells.

Every coercion returns a :class:`Coerced` result: noisy exports are expected,
so a bad value is replaced by a safe default and the substitution is reported
through ``Coerced.warning`` instead of an exception.
"""

from datetime import date
from decimal import Decimal, InvalidOperation, getcontext
import re
import unicodedata

from fundify.domain.models import Coerced
from fundify.domain.services.encoding import REPLACEMENT_CHAR


_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DAY_FIRST_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_CURRENCY_SYMBOLS = ("R$", "$")


def normalize_text(raw) -> Coerced[str]:
    """Clean a raw cell value.

    Replacement markers and control characters are removed, the text is
    composed to NFC and trimmed. Applying it twice gives the same value.

    Args:
        raw: Cell value; None and empty values become an empty string.

    Returns:
        Coerced[str]: Cleaned text, with a warning when NFC composition
        failed and the uncomposed text was kept.
    """
    if raw is None:
        return Coerced("")
    if isinstance(raw, bytes):
        text = raw.decode("utf-8", errors="replace")
    else:
        text = str(raw)
    text = text.replace(REPLACEMENT_CHAR, "")
    text = _CONTROL_CHARS.sub("", text)
    try:
        composed = unicodedata.normalize("NFC", text)
    except (TypeError, ValueError) as exc:
        return Coerced(
            text.strip(),
            warning=f"Unicode normalization failed ({exc}); kept raw text",
        )
    return Coerced(composed.strip())


def normalize_field(raw) -> str:
    """Return the cleaned text of a cell."""
    return normalize_text(raw).value


def parse_amount(raw) -> Coerced[Decimal]:
    """Coerce a cell to a Decimal amount.

    Dot and comma decimal marks are both accepted; when both characters
    appear, the right-most one is the decimal mark and the other groups
    thousands. Empty cells are zero without a warning; non-numeric values
    and values beyond the Decimal context range are zero with a warning.
    """
    text = normalize_field(raw)
    if not text:
        return Coerced(Decimal("0"))

    cleaned = text.replace(" ", "").replace("\u00a0", "")
    for symbol in _CURRENCY_SYMBOLS:
        cleaned = cleaned.replace(symbol, "")
    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(",", ".")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        value = None
    if value is None or not _is_representable(value):
        return Coerced(
            Decimal("0"),
            warning=f'Amount "{text}" is not numeric; using 0',
        )
    return Coerced(value)


def parse_date(raw, today: date | None = None) -> Coerced[str]:
    """Coerce a cell to an ISO ``YYYY-MM-DD`` date string.

    ``YYYY-MM-DD`` is kept as is and ``D/M/YYYY`` is rewritten with zero
    padding. Missing, unparseable and impossible dates become today.

    Args:
        raw: Cell value.
        today: Date used as the fallback; defaults to the current date.

    Returns:
        Coerced[str]: ISO date string.
    """
    text = normalize_field(raw)
    fallback = (today or date.today()).isoformat()
    if not text:
        return Coerced(fallback, warning=f"Date missing; using {fallback}")

    iso_match = _ISO_DATE.match(text)
    if iso_match and _is_calendar_date(*iso_match.groups()):
        return Coerced(text)

    day_first = _DAY_FIRST_DATE.match(text)
    if day_first:
        day, month, year = day_first.groups()
        if _is_calendar_date(year, month, day):
            return Coerced(f"{year}-{month.zfill(2)}-{day.zfill(2)}")

    return Coerced(
        fallback,
        warning=f'Date "{text}" is not recognized; using {fallback}',
    )


def _is_representable(value: Decimal) -> bool:
    if not value.is_finite():
        return False
    if value.is_zero():
        return True
    context = getcontext()
    return context.Emin <= value.adjusted() <= context.Emax


def _is_calendar_date(year: str, month: str, day: str) -> bool:
    try:
        date(int(year), int(month), int(day))
    except ValueError:
        return False
    return True


__all__ = [
    "normalize_text",
    "normalize_field",
    "parse_amount",
    "parse_date",
]
