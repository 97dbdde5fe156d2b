# webapp/__init__.py
from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask, has_request_context, request

from .extensions import api as smorest_api, babel, db, login_manager, mail, migrate
from .error_handlers import register_error_handlers
from core.logging_config import configure_app_logging
from core.settings import settings
from core.time import epoch_seconds
from domain.otp.duration import describe_duration
from domain.otp.exceptions import OTPConfigurationError
from infrastructure.email_sender import EmailSenderFactory
from infrastructure.otp_dispatcher import EmailOTPDispatcher


def _select_locale():
    """1) Accept-Language 2) default"""
    from flask import current_app

    default_language = current_app.config.get("BABEL_DEFAULT_LOCALE", "en")
    if not has_request_context():
        return default_language
    languages = current_app.config.get("LANGUAGES") or [default_language]
    return request.accept_languages.best_match(languages) or default_language


def _load_otp_settings(app: Flask):
    """Resolve the OTP parameters and the access token lifetime once.

    Any error aborts application start-up.
    """

    with app.app_context():
        try:
            otp_settings = settings.load_otp_settings()
            app.extensions["access_token_lifetime_seconds"] = settings.access_token_lifetime_seconds
        except OTPConfigurationError as exc:
            app.logger.critical(
                f"Invalid start-up configuration: {exc}",
                extra={"event": "app.config.invalid"},
            )
            raise

    app.logger.info(
        "OTP settings loaded",
        extra={
            "event": "app.config.otp_loaded",
            "period_seconds": otp_settings.period_seconds,
        },
    )
    return otp_settings


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """アプリケーションファクトリ"""
    from dotenv import load_dotenv
    from .config import Config

    # .env を読み込む（環境変数が未設定の場合のみ）
    load_dotenv()

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    configure_app_logging(app, app.config.get("LOG_LEVEL"))

    otp_settings = _load_otp_settings(app)

    # 拡張初期化
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    babel.init_app(app, locale_selector=_select_locale)
    mail.init_app(app)
    smorest_api.init_app(app)

    with app.app_context():
        sender = EmailSenderFactory.create(mail=mail)

    app.extensions["otp_settings"] = otp_settings
    app.extensions["otp_dispatcher"] = EmailOTPDispatcher(
        sender,
        validity=describe_duration(otp_settings.expiry_value, otp_settings.expiry_unit),
    )
    app.extensions["otp_clock"] = epoch_seconds

    register_error_handlers(app)

    from .api import bp as api_bp

    smorest_api.register_blueprint(api_bp, url_prefix="/api")

    return app
