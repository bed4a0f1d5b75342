# src/chirpy/db/time.py
"""Time utilities for token issuance and verification."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def to_timestamp(moment: datetime) -> int:
    """Return ``moment`` as whole seconds since the epoch."""
    return int(moment.timestamp())
