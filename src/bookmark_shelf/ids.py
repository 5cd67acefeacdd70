"""Default identifier and timestamp sources for the stores."""

import uuid
from datetime import UTC, datetime


def new_id() -> str:
    """Return a fresh, process-unique identifier."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)
