"""Test helpers for email sender implementations."""

from .console_sender import ConsoleEmailSender
from .factory import TestEmailSenderFactory

__all__ = ["ConsoleEmailSender", "TestEmailSenderFactory"]
