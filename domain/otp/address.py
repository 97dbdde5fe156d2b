"""Structural validation of recipient email addresses."""

from __future__ import annotations

import re

from .exceptions import InvalidAddressError

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(address: str) -> bool:
    if not address or not isinstance(address, str):
        return False
    return _EMAIL_PATTERN.match(address) is not None


def validate_email_address(address: str) -> str:
    """Return ``address`` unchanged or raise :class:`InvalidAddressError`."""

    if not is_valid_email(address):
        raise InvalidAddressError(address)
    return address


__all__ = ["is_valid_email", "validate_email_address"]
