"""Test-only email sender factory.

本番の EmailSenderFactory に ``console`` プロバイダーを追加します。
"""

import logging
from typing import Optional

from flask_mailman import Mail

from domain.email_sender import IEmailSender
from infrastructure.email_sender.factory import EmailSenderFactory as ProductionFactory

from .console_sender import ConsoleEmailSender


logger = logging.getLogger(__name__)


class TestEmailSenderFactory(ProductionFactory):
    """ConsoleEmailSender をサポートするテスト用ファクトリ."""

    __test__ = False

    PROVIDER_CONSOLE = "console"

    @staticmethod
    def create(
        provider: Optional[str] = None,
        mail: Optional[Mail] = None,
        default_sender: Optional[str] = None
    ) -> IEmailSender:
        if provider is not None and provider.lower().strip() == TestEmailSenderFactory.PROVIDER_CONSOLE:
            logger.info(
                "Creating console email sender (test only)",
                extra={"event": "email.factory.create", "provider": "console"}
            )
            return ConsoleEmailSender()

        return ProductionFactory.create(provider, mail, default_sender)
