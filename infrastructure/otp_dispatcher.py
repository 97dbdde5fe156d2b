"""Email delivery of one-time codes - Infrastructure layer."""

import logging
from typing import Optional

from flask import render_template
from flask_babel import gettext as _
from jinja2 import TemplateError

from domain.email_sender import EmailMessage, IEmailSender
from domain.otp.dispatcher import NotificationDispatcher
from domain.otp.engine import format_code


logger = logging.getLogger(__name__)

HTML_TEMPLATE = "email/otp_code.html"


class EmailOTPDispatcher(NotificationDispatcher):
    """ワンタイムコードをメールで送信する NotificationDispatcher 実装.

    Attributes:
        sender: メール送信実装
        validity: 本文に表示する有効期間（例: ``"5 minutes"``）
    """

    def __init__(self, sender: IEmailSender, validity: Optional[str] = None):
        self.sender = sender
        self.validity = validity

    def send(self, address: str, code: int) -> None:
        message = self.build_message(address, code)
        self.sender.send(message)
        logger.info(
            "One-time code email dispatched",
            extra={"event": "otp.dispatch.sent", "to": address},
        )

    def build_message(self, address: str, code: int) -> EmailMessage:
        display_code = format_code(code)
        subject = _("Login Code: %(code)s", code=display_code)

        if self.validity:
            body = _(
                "Your login code is %(code)s.\n"
                "It is valid for %(validity)s.\n"
                "\n"
                "If you did not request this code, please ignore this email.",
                code=display_code,
                validity=self.validity,
            )
        else:
            body = _(
                "Your login code is %(code)s.\n"
                "\n"
                "If you did not request this code, please ignore this email.",
                code=display_code,
            )

        html_body = None
        try:
            html_body = render_template(
                HTML_TEMPLATE,
                code=display_code,
                validity=self.validity,
            )
        except TemplateError as template_error:
            logger.warning(
                f"Failed to render HTML template, using plain text only: {template_error}",
                extra={"event": "otp.dispatch.template_error"},
            )

        return EmailMessage(
            to=[address],
            subject=subject,
            body=body,
            html_body=html_body,
        )
