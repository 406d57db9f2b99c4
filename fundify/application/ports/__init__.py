"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import RecordStorePort

__all__ = [
    "DatabaseEnginePort",
    "RecordStorePort",
]
