from .dto import OTPRequestResult, OTPVerificationResult
from .otp_service import OTPRequestService, OTPVerificationService

__all__ = [
    "OTPRequestResult",
    "OTPRequestService",
    "OTPVerificationResult",
    "OTPVerificationService",
]
