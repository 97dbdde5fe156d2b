"""Time-window one-time passcode engine.

Codes follow the RFC 6238 construction (HMAC-SHA1 over the time-step counter,
dynamically truncated to :data:`OTP_DIGITS` decimal digits) with one
difference: the time-step length is the configured period instead of the
usual 30 seconds.

Every function here is pure.  Callers pass the timestamp explicitly, so the
engine never reads a clock and needs no synchronisation.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Union

import pyotp
from pyotp.utils import strings_equal

from .exceptions import CodeGenerationError

OTP_DIGITS = 6
OTP_DIGEST = hashlib.sha1

Secret = Union[str, bytes]


def _encode_secret(secret: Secret) -> str:
    """Return the raw secret as the base32 text expected by :mod:`pyotp`."""

    if isinstance(secret, str):
        raw = secret.encode("utf-8")
    elif isinstance(secret, (bytes, bytearray)):
        raw = bytes(secret)
    else:
        raise TypeError(f"secret must be str or bytes, not {type(secret).__name__}")
    if not raw:
        raise ValueError("secret must not be empty")
    return base64.b32encode(raw).decode("ascii")


def _check_period(period_seconds: int) -> None:
    if isinstance(period_seconds, bool) or not isinstance(period_seconds, int):
        raise ValueError("period_seconds must be an integer")
    if period_seconds <= 0:
        raise ValueError("period_seconds must be positive")


def _check_timestamp(timestamp: int) -> None:
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise ValueError("timestamp must be an integer")
    if timestamp < 0:
        raise ValueError("timestamp must not be negative")


def time_window(period_seconds: int, timestamp: int) -> int:
    """Return the index of the time window containing ``timestamp``."""

    _check_period(period_seconds)
    _check_timestamp(timestamp)
    return timestamp // period_seconds


def seconds_remaining(period_seconds: int, timestamp: int) -> int:
    """Return how many seconds are left in the window containing ``timestamp``."""

    _check_period(period_seconds)
    _check_timestamp(timestamp)
    return period_seconds - (timestamp % period_seconds)


def format_code(code: int) -> str:
    """Return the zero-padded form of ``code`` shown to users."""

    return str(code).zfill(OTP_DIGITS)


def _code_for_window(secret: Secret, window: int) -> str:
    try:
        totp = pyotp.TOTP(_encode_secret(secret), digits=OTP_DIGITS, digest=OTP_DIGEST)
        return totp.generate_otp(window)
    except (TypeError, ValueError, UnicodeError) as exc:
        raise CodeGenerationError() from exc


def generate(secret: Secret, period_seconds: int, timestamp: int) -> int:
    """Generate the code for the window that contains ``timestamp``.

    Args:
        secret: デプロイ全体で共有されるシークレット
        period_seconds: 1 ウィンドウの長さ（秒）
        timestamp: UNIX 時刻（秒）

    Returns:
        int: ``0 <= code < 10 ** OTP_DIGITS`` のコード

    Raises:
        ValueError: period / timestamp が不正な場合
        CodeGenerationError: シークレットから HMAC を計算できない場合
    """
    window = time_window(period_seconds, timestamp)
    return int(_code_for_window(secret, window))


def verify(secret: Secret, code: int, period_seconds: int, timestamp: int) -> bool:
    """Return ``True`` when ``code`` belongs to the window of ``timestamp``.

    Only the window containing ``timestamp`` is checked; a code generated in
    the previous window is rejected even one second after the boundary.
    Verification does not consume the code.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    if code < 0 or code >= 10 ** OTP_DIGITS:
        return False

    window = time_window(period_seconds, timestamp)
    expected = _code_for_window(secret, window)
    return strings_equal(format_code(code), expected)


__all__ = [
    "OTP_DIGITS",
    "format_code",
    "generate",
    "seconds_remaining",
    "time_window",
    "verify",
]
