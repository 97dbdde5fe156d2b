"""Time-related helpers.

This module centralizes helpers for obtaining timestamps in UTC.  The OTP
services receive :func:`epoch_seconds` as their clock so that tests can
substitute a fixed timestamp.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as an aware ``datetime`` instance."""

    return datetime.now(timezone.utc)


def utc_now_isoformat() -> str:
    """Return the current UTC time in ISO 8601 format ending with ``Z``."""

    return utc_now().isoformat().replace("+00:00", "Z")


def epoch_seconds() -> int:
    """Return the current UNIX time in whole seconds."""

    return int(utc_now().timestamp())


__all__ = ["epoch_seconds", "utc_now", "utc_now_isoformat"]
