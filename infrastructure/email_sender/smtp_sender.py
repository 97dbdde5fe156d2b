"""SMTP email sender implementation - Infrastructure layer.

Flask-Mailman を使用して SMTP 経由でメールを送信します。
接続設定は Flask の ``MAIL_*`` 設定から読み込まれます。
"""

import logging
from typing import Optional

from flask import current_app, has_app_context
from flask_mailman import EmailMessage, EmailMultiAlternatives, Mail

from domain.email_sender.sender_interface import IEmailSender
from domain.email_sender.email_message import EmailMessage as DomainEmailMessage


logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    """SMTPを使用したメール送信実装.

    Attributes:
        mail: Flask-Mailmanインスタンス
        default_sender: デフォルトの送信者アドレス
    """

    def __init__(self, mail: Mail, default_sender: Optional[str] = None):
        self.mail = mail
        self.default_sender = default_sender

    def send(self, message: DomainEmailMessage) -> bool:
        """SMTPでメールを送信する.

        Raises:
            Exception: SMTP 接続・送信で発生した例外はそのまま送出する
        """
        try:
            mail_message = self._convert_to_mailman_message(message)
            mail_message.connection = self.mail.get_connection()
            mail_message.send()
        except Exception as e:
            logger.error(
                f"Failed to send email via SMTP: {e}",
                extra={
                    "event": "email.smtp.error",
                    "to": message.to,
                    "error": str(e),
                },
            )
            raise

        logger.info(
            "Email sent successfully via SMTP",
            extra={"event": "email.smtp.sent", "to": message.to},
        )
        return True

    def validate_config(self) -> bool:
        """MAIL_SERVER が設定されているかを返す."""
        if not has_app_context():
            return False

        mail_server = current_app.config.get("MAIL_SERVER")
        if not mail_server:
            logger.warning(
                "MAIL_SERVER is not configured",
                extra={"event": "email.smtp.config_missing"},
            )
            return False
        return True

    def _convert_to_mailman_message(self, message: DomainEmailMessage) -> EmailMessage:
        """ドメインメッセージを Flask-Mailman メッセージに変換する."""
        params = {
            "subject": message.subject,
            "body": message.body,
            "from_email": message.from_address or self.default_sender,
            "to": list(message.to),
        }

        # HTML 本文がある場合はテキストとの multipart/alternative にする
        if message.html_body:
            mail_message = EmailMultiAlternatives(**params)
            mail_message.attach_alternative(message.html_body, "text/html")
            return mail_message
        return EmailMessage(**params)
