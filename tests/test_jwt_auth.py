import jwt
import pytest

from datetime import datetime, timedelta, timezone

from shared.application.authenticated_principal import AuthenticatedPrincipal
from webapp.services.token_service import TokenService


@pytest.mark.usefixtures("app")
def test_generate_and_verify_access_token():
    token = TokenService.generate_access_token(42, email="user@example.com")

    principal = TokenService.verify_access_token(token)

    assert isinstance(principal, AuthenticatedPrincipal)
    assert principal.subject_id == 42
    assert principal.identifier == "42"
    assert principal.email == "user@example.com"
    assert principal.is_authenticated is True
    assert principal.get_id() == "42"


def test_token_lifetime_follows_configuration(make_app):
    app = make_app(JWT_EXP_VALUE="2", JWT_EXP_UNIT="minutes")

    with app.app_context():
        token = TokenService.generate_access_token(1)
    claims = jwt.decode(token, "test-jwt-secret", algorithms=["HS256"])

    assert claims["exp"] - claims["iat"] == 120


def test_token_lifetime_is_resolved_at_startup(make_app):
    app = make_app(JWT_EXP_VALUE="2", JWT_EXP_UNIT="minutes")
    assert app.extensions["access_token_lifetime_seconds"] == 120

    with app.app_context():
        app.config["JWT_EXP_UNIT"] = "hours"
        token = TokenService.generate_access_token(1)
    claims = jwt.decode(token, "test-jwt-secret", algorithms=["HS256"])

    assert claims["exp"] - claims["iat"] == 120


@pytest.mark.usefixtures("app")
def test_expired_token_is_rejected():
    token = TokenService.generate_access_token(1, lifetime_seconds=-10)
    assert TokenService.verify_access_token(token) is None


@pytest.mark.usefixtures("app")
def test_token_signed_with_other_key_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "1", "iat": now, "exp": now + timedelta(minutes=5)},
        "another-secret",
        algorithm="HS256",
    )
    assert TokenService.verify_access_token(token) is None


@pytest.mark.usefixtures("app")
def test_token_without_subject_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode({"exp": now + timedelta(minutes=5)}, "test-jwt-secret", algorithm="HS256")
    assert TokenService.verify_access_token(token) is None


@pytest.mark.usefixtures("app")
def test_non_numeric_subject_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "alice", "exp": now + timedelta(minutes=5)},
        "test-jwt-secret",
        algorithm="HS256",
    )
    assert TokenService.verify_access_token(token) is None
