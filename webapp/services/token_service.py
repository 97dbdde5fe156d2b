"""JWT アクセストークン検証サービス"""

from __future__ import annotations

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from flask import current_app

from core.settings import settings
from shared.application.authenticated_principal import AuthenticatedPrincipal


class TokenService:
    """Bearer トークンから呼び出し元の主体を取り出すサービス"""

    ALGORITHM = "HS256"

    @staticmethod
    def _signing_key() -> str:
        key = settings.jwt_secret_key or current_app.config.get("SECRET_KEY")
        if not key:
            raise RuntimeError("JWT_SECRET_KEY must be set")
        return key

    @classmethod
    def generate_access_token(
        cls,
        user_id: int,
        email: Optional[str] = None,
        lifetime_seconds: Optional[int] = None,
    ) -> str:
        """Issue an access token for *user_id*.

        このサービスはトークン発行エンドポイントを持ちません。本メソッドは
        サービス間トークンやテスト用トークンを発行するためのヘルパーで、
        通常のアクセストークンは上流の認証基盤が同じ鍵で署名します。

        The lifetime defaults to the value resolved from
        ``JWT_EXP_VALUE``/``JWT_EXP_UNIT`` when the app was created.
        """
        if lifetime_seconds is None:
            lifetime_seconds = current_app.extensions.get("access_token_lifetime_seconds")
        if lifetime_seconds is None:
            lifetime_seconds = settings.access_token_lifetime_seconds
        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=lifetime_seconds),
            "jti": secrets.token_urlsafe(8),
        }
        if email:
            payload["email"] = email
        return jwt.encode(payload, cls._signing_key(), algorithm=cls.ALGORITHM)

    @classmethod
    def _decode_access_token_payload(cls, token: str) -> Optional[dict[str, Any]]:
        try:
            return jwt.decode(
                token,
                cls._signing_key(),
                algorithms=[cls.ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            current_app.logger.debug("JWT token expired")
            return None
        except jwt.MissingRequiredClaimError as exc:
            current_app.logger.debug("JWT token missing required claim: %s", exc.claim)
            return None
        except jwt.InvalidTokenError as exc:
            current_app.logger.debug(f"JWT token invalid: {exc}")
            return None

    @classmethod
    def verify_access_token(cls, token: str) -> Optional[AuthenticatedPrincipal]:
        """
        Validates the access token and builds an AuthenticatedPrincipal from it.

        Returns:
            AuthenticatedPrincipal: If the token is valid and not expired.
            None: If the token is invalid or expired.
        """
        payload = cls._decode_access_token_payload(token)
        if payload is None:
            return None

        subject = payload.get("sub")
        try:
            subject_id = int(subject)
        except (TypeError, ValueError):
            current_app.logger.debug("JWT token subject claim invalid")
            return None

        return AuthenticatedPrincipal(
            subject_id=subject_id,
            identifier=str(subject),
            email=payload.get("email"),
        )
