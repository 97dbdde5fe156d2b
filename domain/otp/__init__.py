"""OTP domain layer.

コードの生成・検証と有効期間の正規化を提供します。
"""

from .address import is_valid_email, validate_email_address
from .dispatcher import NotificationDispatcher
from .duration import UNIT_SECONDS, describe_duration, normalize_duration
from .engine import OTP_DIGITS, format_code, generate, seconds_remaining, time_window, verify
from .exceptions import (
    CodeGenerationError,
    DispatchFailedError,
    InvalidAddressError,
    InvalidUnitError,
    OTPConfigurationError,
    OTPError,
    OTPExpiredError,
)

__all__ = [
    "OTP_DIGITS",
    "UNIT_SECONDS",
    "CodeGenerationError",
    "DispatchFailedError",
    "InvalidAddressError",
    "InvalidUnitError",
    "NotificationDispatcher",
    "OTPConfigurationError",
    "OTPError",
    "OTPExpiredError",
    "describe_duration",
    "format_code",
    "generate",
    "is_valid_email",
    "normalize_duration",
    "seconds_remaining",
    "time_window",
    "validate_email_address",
    "verify",
]
