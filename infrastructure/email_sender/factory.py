"""Email sender factory - Infrastructure layer.

設定に基づいて適切なメール送信実装を生成します。
"""

import logging
from typing import Optional

from flask_mailman import Mail

from core.settings import settings
from domain.email_sender.sender_interface import IEmailSender
from .smtp_sender import SmtpEmailSender


logger = logging.getLogger(__name__)


class EmailSenderFactory:
    """メール送信実装のファクトリクラス."""

    PROVIDER_SMTP = "smtp"
    DEFAULT_PROVIDER = PROVIDER_SMTP

    @staticmethod
    def create(
        provider: Optional[str] = None,
        mail: Optional[Mail] = None,
        default_sender: Optional[str] = None
    ) -> IEmailSender:
        """設定に基づいてメール送信実装を生成する.

        Args:
            provider: メールプロバイダー名（省略時は MAIL_PROVIDER 設定）
            mail: Flask-Mailman インスタンス
            default_sender: デフォルトの送信者アドレス

        Raises:
            ValueError: 未対応のプロバイダーが指定された場合
        """
        if provider is None:
            provider = settings.mail_provider

        provider = provider.lower().strip()

        logger.info(
            f"Creating email sender with provider: {provider}",
            extra={"event": "email.factory.create", "provider": provider}
        )

        if provider == EmailSenderFactory.PROVIDER_SMTP:
            return EmailSenderFactory._create_smtp_sender(mail, default_sender)

        raise ValueError(
            f"Unsupported email provider: {provider}. "
            f"Supported providers: {EmailSenderFactory.PROVIDER_SMTP}"
        )

    @staticmethod
    def _create_smtp_sender(
        mail: Optional[Mail],
        default_sender: Optional[str]
    ) -> SmtpEmailSender:
        if mail is None:
            from webapp.extensions import mail as app_mail
            mail = app_mail

        if default_sender is None:
            address = settings.mail_default_sender or settings.mail_username
            if address:
                default_sender = f"{settings.mail_sender_name} <{address}>"

        return SmtpEmailSender(mail=mail, default_sender=default_sender)
