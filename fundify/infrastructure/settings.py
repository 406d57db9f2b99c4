"""Settings helpers for the import pipeline and record stores."""

import codecs
from dataclasses import dataclass
import os

import dotenv

from fundify.domain.constants import (
    DEBUG_SAMPLE_SIZE,
    DEFAULT_CATEGORY,
    DEFAULT_ENCODINGS,
    PRIMARY_DELIMITER,
    QUOTE_CHAR,
    SECONDARY_DELIMITER,
)
from fundify.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = {"1", "true", "yes", "on"}
_STORE_BACKENDS = ("memory", "sqlalchemy")


@dataclass(frozen=True)
class ImportSettings:
    """Settings for decoding, tokenizing and committing imports.

    Attributes:
        encodings: Ordered candidate codecs for the encoding resolver.
        primary_delimiter: Default field delimiter.
        secondary_delimiter: Delimiter preferred when on the first line.
        default_category: Category of transactions without one.
        strict_import: Reject batches with any diagnostic.
        debug_sample_size: Raw rows attached to a rejection.
        store_backend: Record store implementation (memory or sqlalchemy).
    """

    encodings: tuple[str, ...] = DEFAULT_ENCODINGS
    primary_delimiter: str = PRIMARY_DELIMITER
    secondary_delimiter: str = SECONDARY_DELIMITER
    default_category: str = DEFAULT_CATEGORY
    strict_import: bool = False
    debug_sample_size: int = DEBUG_SAMPLE_SIZE
    store_backend: str = "memory"

    @classmethod
    def from_env(cls) -> "ImportSettings":
        """Build settings from environment variables and a local .env file.

        Returns:
            ImportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            encodings=cls._parse_encodings(
                os.getenv("FUNDIFY_ENCODINGS"),
                logger=logger,
            ),
            primary_delimiter=cls._parse_delimiter(
                os.getenv("FUNDIFY_PRIMARY_DELIMITER"),
                PRIMARY_DELIMITER,
                logger=logger,
            ),
            secondary_delimiter=cls._parse_delimiter(
                os.getenv("FUNDIFY_SECONDARY_DELIMITER"),
                SECONDARY_DELIMITER,
                logger=logger,
            ),
            default_category=os.getenv(
                "FUNDIFY_DEFAULT_CATEGORY",
                DEFAULT_CATEGORY,
            ),
            strict_import=(
                os.getenv("FUNDIFY_STRICT_IMPORT", "").strip().lower()
                in _TRUE_VALUES
            ),
            debug_sample_size=cls._parse_positive_int(
                os.getenv("FUNDIFY_DEBUG_SAMPLE_SIZE"),
                DEBUG_SAMPLE_SIZE,
                logger=logger,
            ),
            store_backend=cls._parse_backend(
                os.getenv("FUNDIFY_STORE"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_encodings(raw: str | None, logger) -> tuple[str, ...]:
        """Parse a comma-separated codec list, dropping unknown codecs.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            tuple[str, ...]: Known codecs, or the defaults when none remain.
        """
        if not raw:
            return DEFAULT_ENCODINGS
        encodings = []
        for name in raw.split(","):
            candidate = name.strip()
            if not candidate:
                continue
            try:
                codecs.lookup(candidate)
            except LookupError:
                logger.warning(f"Unknown encoding '{candidate}' ignored")
                continue
            encodings.append(candidate)
        return tuple(encodings) or DEFAULT_ENCODINGS

    @staticmethod
    def _parse_delimiter(raw: str | None, default: str, logger) -> str:
        """Return a single-character delimiter, or the default.

        Args:
            raw: Raw environment value.
            default: Delimiter used when the value is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            str: Configured delimiter.
        """
        if raw is None:
            return default
        if len(raw) != 1 or raw == QUOTE_CHAR or raw in "\r\n":
            logger.warning(f"Invalid delimiter {raw!r}, using {default!r}")
            return default
        return raw

    @staticmethod
    def _parse_positive_int(raw: str | None, default: int, logger) -> int:
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid integer '{raw}', using {default}")
            return default
        return value if value > 0 else default

    @staticmethod
    def _parse_backend(raw: str | None, logger) -> str:
        backend = (raw or "memory").strip().lower()
        if backend not in _STORE_BACKENDS:
            logger.warning(
                f"Unsupported record store '{backend}', using memory"
            )
            return "memory"
        return backend


__all__ = ["ImportSettings"]
