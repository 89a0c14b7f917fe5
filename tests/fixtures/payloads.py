"""
Source payloads and schemas shared across tests.

The payload mimics a test-run record returned by a CI API, using
snake_case keys and numeric status codes.
"""

from datetime import datetime, timezone
from typing import Any

from morph import ObjectNode, m

STATUS_CODES = (0, 1, 2)
STATUS_NAMES = ("Tested", "Pending", "Failed")


def create_run_payload() -> dict[str, Any]:
    """A fresh source record; tests may mutate it freely."""
    return {
        "run_id": 42,
        "started_at": 0,
        "status": 1,
        "owner": {
            "user_name": "ada",
            "org": "lab",
        },
        "tags": ["nightly", "gpu"],
    }


def create_run_schema() -> ObjectNode:
    """Schema exercising every node kind."""
    return m.object(
        {
            "run_id": m.to("runId"),
            "started_at": m.transform(
                lambda ms: datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
            ).to("startedAt"),
            "status": m.enum(STATUS_CODES, STATUS_NAMES),
            "owner": m.object({"user_name": m.to("userName")}).to("createdBy"),
        }
    )


# Same reshaping as create_run_schema, minus the transform
SCHEMA_DOCUMENT: dict[str, Any] = {
    "version": "1.0",
    "description": "CI run record",
    "shape": {
        "run_id": {"to": "runId"},
        "status": {"enum": {"from": [0, 1, 2], "to": ["Tested", "Pending", "Failed"]}},
        "owner": {
            "shape": {"user_name": {"to": "userName"}},
            "to": "createdBy",
        },
    },
}
