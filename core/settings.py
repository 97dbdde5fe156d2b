"""Centralised application settings abstraction.

This module exposes :class:`ApplicationSettings` which consolidates all
configuration lookups so the rest of the code base never touches
``os.environ`` directly.  The Flask application config takes precedence over
the process environment (or any mapping provided), which lets tests build a
dedicated :class:`ApplicationSettings` over a plain ``dict``.

The OTP engine parameters are resolved once through
:meth:`ApplicationSettings.load_otp_settings` into an immutable
:class:`OTPSettings` value that the app factory shares with every request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, TYPE_CHECKING, cast

from flask import current_app, has_app_context

from domain.otp.duration import normalize_duration
from domain.otp.exceptions import OTPConfigurationError

if TYPE_CHECKING:  # pragma: no cover
    from flask import Flask


_DEFAULT_MAIL_PROVIDER = "smtp"
_DEFAULT_MAIL_SENDER_NAME = "Verification"
_DEFAULT_ACCESS_TOKEN_LIFETIME_SECONDS = 3600


@dataclass(frozen=True)
class _EnvironmentFacade:
    """Thin wrapper that provides ``Mapping`` compatible access to env vars."""

    source: Mapping[str, str]

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, str]] = None) -> "_EnvironmentFacade":
        return cls(source=os.environ if env is None else env)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.source.get(key, default)


@dataclass(frozen=True)
class OTPSettings:
    """Process-wide OTP parameters, resolved once at start-up."""

    secret: str = field(repr=False)
    period_seconds: int
    expiry_value: int
    expiry_unit: str


class ApplicationSettings:
    """Domain level representation of configuration values.

    Explicit properties are preferred over generic ``get`` access so that
    callers use intent-revealing names and defaults live in one place.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = _EnvironmentFacade.from_environ(env)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _get(self, key: str, default: Optional[str] = None):
        if has_app_context():
            app = cast("Flask", current_app)
            if key in app.config and app.config.get(key) is not None:
                return app.config.get(key)

        value = self._env.get(key)
        if value is not None:
            return value
        return default

    def get(self, key: str, default=None):
        """Return the configured value for *key* or *default* if missing."""

        value = self._get(key)
        return default if value is None else value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean configuration value."""

        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised in {"1", "true", "yes", "on"}:
                return True
            if normalised in {"0", "false", "no", "off"}:
                return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Return an integer configuration value."""

        value = self._get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _require(self, key: str) -> str:
        value = self._get(key)
        if value is None or str(value).strip() == "":
            raise OTPConfigurationError(f"{key} must be set")
        return str(value)

    # ------------------------------------------------------------------
    # Generic flags
    # ------------------------------------------------------------------
    @property
    def testing(self) -> bool:
        return self.get_bool("TESTING")

    @property
    def log_level(self) -> str:
        return str(self.get("LOG_LEVEL", "INFO")).upper()

    # ------------------------------------------------------------------
    # Mail
    # ------------------------------------------------------------------
    @property
    def mail_provider(self) -> str:
        return str(self.get("MAIL_PROVIDER", _DEFAULT_MAIL_PROVIDER)).lower().strip()

    @property
    def mail_default_sender(self) -> Optional[str]:
        value = self._get("MAIL_DEFAULT_SENDER")
        return str(value) if value else None

    @property
    def mail_username(self) -> Optional[str]:
        value = self._get("MAIL_USERNAME")
        return str(value) if value else None

    @property
    def mail_sender_name(self) -> str:
        return str(self.get("MAIL_SENDER_NAME", _DEFAULT_MAIL_SENDER_NAME))

    # ------------------------------------------------------------------
    # Access tokens
    # ------------------------------------------------------------------
    @property
    def jwt_secret_key(self) -> Optional[str]:
        value = self._get("JWT_SECRET_KEY")
        return str(value) if value else None

    @property
    def access_token_lifetime_seconds(self) -> int:
        """Lifetime of issued access tokens, from ``JWT_EXP_VALUE``/``JWT_EXP_UNIT``."""

        raw_value = self._get("JWT_EXP_VALUE")
        if raw_value is None:
            return _DEFAULT_ACCESS_TOKEN_LIFETIME_SECONDS
        unit = str(self.get("JWT_EXP_UNIT", "seconds")).strip()
        return normalize_duration(self._parse_positive_int("JWT_EXP_VALUE", raw_value), unit)

    # ------------------------------------------------------------------
    # OTP
    # ------------------------------------------------------------------
    @staticmethod
    def _parse_positive_int(key: str, raw_value) -> int:
        try:
            value = int(str(raw_value).strip())
        except (TypeError, ValueError) as exc:
            raise OTPConfigurationError(f"{key} must be an integer") from exc
        if value <= 0:
            raise OTPConfigurationError(f"{key} must be positive")
        return value

    def load_otp_settings(self) -> OTPSettings:
        """Resolve the OTP secret and period.

        Raises:
            OTPConfigurationError: a required key is missing or malformed.
            InvalidUnitError: ``OTP_EXP_UNIT`` is not a supported unit.
        """

        secret = self._require("OTP_SECRET")
        expiry_value = self._parse_positive_int("OTP_EXP_VALUE", self._require("OTP_EXP_VALUE"))
        expiry_unit = self._require("OTP_EXP_UNIT").strip()
        period_seconds = normalize_duration(expiry_value, expiry_unit)
        return OTPSettings(
            secret=secret,
            period_seconds=period_seconds,
            expiry_value=expiry_value,
            expiry_unit=expiry_unit,
        )


settings = ApplicationSettings()

__all__ = ["ApplicationSettings", "OTPSettings", "settings"]
