"""
Golden records for comparison testing.

Known-good outputs of mapping create_run_payload() through the fixture
schemas.
"""

from datetime import datetime, timezone

GOLDEN_RUN_RECORD = {
    "runId": 42,
    "startedAt": datetime(1970, 1, 1, tzinfo=timezone.utc),
    "status": "Pending",
    "createdBy": {
        "userName": "ada",
        "org": "lab",
    },
    "tags": ["nightly", "gpu"],
}

GOLDEN_DOCUMENT_RECORD = {
    "runId": 42,
    "started_at": 0,
    "status": "Pending",
    "createdBy": {
        "userName": "ada",
        "org": "lab",
    },
    "tags": ["nightly", "gpu"],
}
