"""Request authentication helpers for API views."""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional

from flask import abort, current_app, request
from flask_login import current_user

from shared.application.authenticated_principal import AuthenticatedPrincipal


def jwt_required(f: Callable) -> Callable:
    """Reject the request with 401 unless a valid bearer token was supplied."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            current_app.logger.info(
                "Unauthenticated API access",
                extra={"event": "auth.jwt.missing", "path": request.path},
            )
            abort(401)
        return f(*args, **kwargs)

    decorated_function._auth_enforced = True  # type: ignore[attr-defined]
    return decorated_function


def skip_auth(f: Callable) -> Callable:
    """Mark a view as intentionally public."""

    f._skip_auth = True  # type: ignore[attr-defined]
    return f


def get_current_principal() -> Optional[AuthenticatedPrincipal]:
    user = current_user._get_current_object()
    if isinstance(user, AuthenticatedPrincipal):
        return user
    return None


__all__ = ["get_current_principal", "jwt_required", "skip_auth"]
