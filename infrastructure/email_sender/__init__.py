"""Email sender infrastructure layer - Concrete implementations.

Note:
    ConsoleEmailSender はテスト専用のため tests/infrastructure/email_sender/ にあります。
"""

from .smtp_sender import SmtpEmailSender
from .factory import EmailSenderFactory

__all__ = ["SmtpEmailSender", "EmailSenderFactory"]
