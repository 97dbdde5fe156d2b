from flask import current_app, g
from flask_babel import Babel
from flask_login import LoginManager
from flask_mailman import Mail
from flask_migrate import Migrate
from flask_smorest import Api

from core.db import db

migrate = Migrate()
login_manager = LoginManager()
babel = Babel()
mail = Mail()
api = Api()

login_manager.login_message = None


@login_manager.request_loader
def load_user_from_request(request):
    """Authorization ヘッダーの Bearer トークンから主体をロード"""
    auth = request.headers.get("Authorization")
    if not auth or not auth.lower().startswith("bearer "):
        return None
    token = auth.split(" ", 1)[1].strip()
    if not token:
        return None

    from webapp.services.token_service import TokenService

    principal = TokenService.verify_access_token(token)
    if not principal:
        current_app.logger.debug(
            "JWT token verification failed in request_loader",
            extra={"event": "auth.jwt.invalid"},
        )
        return None

    g.current_user = principal
    return principal


__all__ = ["api", "babel", "db", "login_manager", "mail", "migrate"]
