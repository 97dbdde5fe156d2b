import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("TESTING", "true")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# RFC 6238 Appendix B の SHA1 用シークレット
RFC6238_SECRET = "12345678901234567890"

FIXED_NOW = 1_000_000_000


class RecordingDispatcher:
    """送信内容を記録するだけの NotificationDispatcher"""

    def __init__(self, error: Exception | None = None):
        self.sent: list[tuple[str, int]] = []
        self.error = error

    def send(self, address: str, code: int) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append((address, code))


class FixedClock:
    def __init__(self, now: int = FIXED_NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now


def _test_config(**overrides):
    from webapp.config import TestConfig

    config = {
        key: getattr(TestConfig, key)
        for key in dir(TestConfig)
        if key.isupper()
    }
    config.update(overrides)
    return config


@pytest.fixture
def make_app():
    """Build an application from TestConfig plus overrides."""

    def _factory(**overrides):
        from webapp import create_app

        return create_app(_test_config(**overrides))

    return _factory


@pytest.fixture
def app(make_app):
    from webapp.extensions import db

    app = make_app()
    app.extensions["otp_dispatcher"] = RecordingDispatcher()
    app.extensions["otp_clock"] = FixedClock()

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def dispatcher(app):
    return app.extensions["otp_dispatcher"]


@pytest.fixture
def clock(app):
    return app.extensions["otp_clock"]


@pytest.fixture
def user(app):
    from core.models.user import User
    from webapp.extensions import db

    model = User(email="user@example.com")
    db.session.add(model)
    db.session.commit()
    return model


@pytest.fixture
def auth_headers(app, user):
    from webapp.services.token_service import TokenService

    token = TokenService.generate_access_token(user.id, email=user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mail_outbox(app):
    """locmem バックエンドが送信メールを溜めるリスト"""

    state = app.extensions["mailman"]
    state.outbox = []
    return state.outbox
