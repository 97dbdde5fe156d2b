"""OTP アプリケーション層 DTO"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class OTPRequestResult:
    email: str
    code: int = field(repr=False)
    display_code: str = field(repr=False)
    expires_in: int

    @property
    def message(self) -> str:
        return f"OTP has been sent to email: {self.email}"


@dataclass(frozen=True, slots=True)
class OTPVerificationResult:
    verified: bool
    message: str = "Verified successful!"
