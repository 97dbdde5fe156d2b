"""OTP issuance and verification services - Application layer.

Both services read the immutable :class:`~core.settings.OTPSettings` built at
start-up and take the current time from an injectable clock.  Neither retries
on failure; every error is reported once to the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from core.logging_config import log_event_error, log_event_info
from core.settings import OTPSettings
from core.time import epoch_seconds
from domain.otp import engine
from domain.otp.address import validate_email_address
from domain.otp.dispatcher import NotificationDispatcher
from domain.otp.exceptions import (
    CodeGenerationError,
    DispatchFailedError,
    InvalidAddressError,
    OTPExpiredError,
)
from domain.user.repository import UserRepository

from .dto import OTPRequestResult, OTPVerificationResult


logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class OTPRequestService:
    """Validate the recipient, issue a code and hand it to the dispatcher."""

    def __init__(
        self,
        otp_settings: OTPSettings,
        dispatcher: NotificationDispatcher,
        user_repository: Optional[UserRepository] = None,
        clock: Clock = epoch_seconds,
    ):
        self.otp_settings = otp_settings
        self.dispatcher = dispatcher
        self.user_repository = user_repository
        self.clock = clock

    def request_otp(self, address: str, user_id: Optional[int] = None) -> OTPRequestResult:
        """コードを発行して ``address`` に送信する.

        Raises:
            InvalidAddressError: アドレスの形式が不正な場合（コード生成前に検出）
            CodeGenerationError: コードを計算できない場合
            DispatchFailedError: 送信に失敗した場合
        """
        try:
            validate_email_address(address)
        except InvalidAddressError:
            logger.warning(
                "Rejected OTP request for malformed address",
                extra={"event": "otp.request.invalid_address", "to": address},
            )
            raise

        now = self.clock()
        period = self.otp_settings.period_seconds
        try:
            code = engine.generate(self.otp_settings.secret, period, now)
        except CodeGenerationError:
            log_event_error(logger, "Failed to generate OTP code", "otp.request.generation_failed")
            raise

        try:
            self.dispatcher.send(address, code)
        except Exception as exc:
            log_event_error(
                logger,
                f"Failed to dispatch OTP: {exc}",
                "otp.request.dispatch_failed",
                to=address,
            )
            raise DispatchFailedError(address, str(exc)) from exc

        if self.user_repository is not None and user_id is not None:
            self.user_repository.record_otp_request(
                user_id, datetime.fromtimestamp(now, timezone.utc)
            )

        log_event_info(
            logger,
            "OTP issued",
            "otp.request.issued",
            to=address,
            user_id=user_id,
            window=engine.time_window(period, now),
        )
        return OTPRequestResult(
            email=address,
            code=code,
            display_code=engine.format_code(code),
            expires_in=engine.seconds_remaining(period, now),
        )


class OTPVerificationService:
    """Check a caller-supplied code against the current time window."""

    def __init__(self, otp_settings: OTPSettings, clock: Clock = epoch_seconds):
        self.otp_settings = otp_settings
        self.clock = clock

    def verify_otp(self, code: int, user_id: Optional[int] = None) -> OTPVerificationResult:
        """Raise :class:`OTPExpiredError` unless ``code`` matches the current window.

        A wrong code and a code from an elapsed window are reported the same way.
        """
        verified = engine.verify(
            self.otp_settings.secret,
            code,
            self.otp_settings.period_seconds,
            self.clock(),
        )
        if not verified:
            logger.info(
                "OTP verification failed",
                extra={"event": "otp.verify.failed", "user_id": user_id},
            )
            raise OTPExpiredError()

        log_event_info(logger, "OTP verified", "otp.verify.succeeded", user_id=user_id)
        return OTPVerificationResult(verified=True)
