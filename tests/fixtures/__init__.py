"""Test fixtures for morph tests."""

from .payloads import (
    SCHEMA_DOCUMENT,
    create_run_payload,
    create_run_schema,
)
from .golden_records import (
    GOLDEN_RUN_RECORD,
    GOLDEN_DOCUMENT_RECORD,
)

__all__ = [
    "SCHEMA_DOCUMENT",
    "create_run_payload",
    "create_run_schema",
    "GOLDEN_RUN_RECORD",
    "GOLDEN_DOCUMENT_RECORD",
]
