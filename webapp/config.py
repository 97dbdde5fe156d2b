import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Flask application configuration read from the environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    db_uri = os.environ.get("DATABASE_URI", "sqlite://")
    SQLALCHEMY_DATABASE_URI = db_uri

    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }

    # One-time passcodes; resolved into OTPSettings once by create_app()
    OTP_SECRET = os.environ.get("OTP_SECRET")
    OTP_EXP_VALUE = os.environ.get("OTP_EXP_VALUE")
    OTP_EXP_UNIT = os.environ.get("OTP_EXP_UNIT")

    # Access tokens
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY")
    JWT_EXP_VALUE = os.environ.get("JWT_EXP_VALUE")
    JWT_EXP_UNIT = os.environ.get("JWT_EXP_UNIT")

    # Mail (Flask-Mailman)
    MAIL_PROVIDER = os.environ.get("MAIL_PROVIDER", "smtp")
    MAIL_SERVER = os.environ.get("MAIL_SERVER")
    MAIL_PORT = int(os.environ.get("MAIL_PORT", "587"))
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD")
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", True)
    MAIL_USE_SSL = _env_bool("MAIL_USE_SSL", False)
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER")
    MAIL_SENDER_NAME = os.environ.get("MAIL_SENDER_NAME", "Verification")
    MAIL_TIMEOUT = int(os.environ.get("MAIL_TIMEOUT", "15"))

    # Internationalisation
    LANGUAGES = [lang.strip() for lang in os.environ.get("LANGUAGES", "en").split(",") if lang.strip()]
    BABEL_DEFAULT_LOCALE = os.environ.get("BABEL_DEFAULT_LOCALE", "en")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # OpenAPI (flask-smorest)
    API_TITLE = "OTP API"
    API_VERSION = "1.0.0"
    OPENAPI_VERSION = "3.0.3"


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    OTP_SECRET = "S1"
    OTP_EXP_VALUE = "5"
    OTP_EXP_UNIT = "minutes"
    JWT_SECRET_KEY = "test-jwt-secret"
    MAIL_PROVIDER = "smtp"
    MAIL_BACKEND = "locmem"
    MAIL_DEFAULT_SENDER = "noreply@example.com"
