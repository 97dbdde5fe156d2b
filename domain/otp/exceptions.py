"""OTP ドメインで利用する例外定義"""

from __future__ import annotations


class OTPError(Exception):
    """OTP 機能における基底例外"""


class OTPConfigurationError(OTPError):
    """Configuration required by the OTP engine is missing or malformed."""


class InvalidUnitError(OTPConfigurationError):
    """The expiry unit is not one of the supported duration units."""

    def __init__(self, unit: str):
        super().__init__(f"Invalid unit: {unit!r}")
        self.unit = unit


class InvalidAddressError(OTPError):
    """The recipient address does not look like an email address."""

    def __init__(self, address: str):
        super().__init__("Invalid email format")
        self.address = address


class CodeGenerationError(OTPError):
    """The HMAC based code could not be computed."""

    def __init__(self, message: str = "Fail to create OTP code!"):
        super().__init__(message)


class OTPExpiredError(OTPError):
    """The supplied code does not match the current time window."""

    def __init__(self):
        super().__init__("OTP has expired!")


class DispatchFailedError(OTPError):
    """Handing the code to the notification transport failed.

    The transport exception is kept as ``__cause__``.
    """

    def __init__(self, address: str, reason: str):
        super().__init__(reason)
        self.address = address
        self.reason = reason


__all__ = [
    "OTPError",
    "OTPConfigurationError",
    "InvalidUnitError",
    "InvalidAddressError",
    "CodeGenerationError",
    "OTPExpiredError",
    "DispatchFailedError",
]
