"""Conversion of configured ``(value, unit)`` durations into seconds."""

from __future__ import annotations

from typing import Mapping

from .exceptions import InvalidUnitError

# Fixed approximations: a month is 30 days and a year is 365 days.
UNIT_SECONDS: Mapping[str, int] = {
    "seconds": 1,
    "minutes": 60,
    "hours": 3600,
    "days": 86400,
    "weeks": 604800,
    "months": 2592000,
    "years": 31536000,
}


def normalize_duration(value: int, unit: str) -> int:
    """Return ``value`` expressed in ``unit`` as a number of seconds.

    Args:
        value: 数値部分（例: ``5``）
        unit: 単位名（``seconds``, ``minutes`` ... ``years``）

    Returns:
        int: 秒数

    Raises:
        InvalidUnitError: 未対応の単位が指定された場合
    """
    try:
        multiplier = UNIT_SECONDS[unit]
    except (KeyError, TypeError) as exc:
        raise InvalidUnitError(unit) from exc
    return value * multiplier


def describe_duration(value: int, unit: str) -> str:
    """Return a short English label such as ``"5 minutes"`` or ``"1 hour"``."""

    if unit not in UNIT_SECONDS:
        raise InvalidUnitError(unit)
    label = unit[:-1] if value == 1 else unit
    return f"{value} {label}"


__all__ = ["UNIT_SECONDS", "describe_duration", "normalize_duration"]
