from flask import jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from . import bp
from ..auth import skip_auth
from ..extensions import db
from core.time import utc_now_isoformat


@bp.get("/health/live")
@skip_auth
def health_live():
    """Simple liveness probe."""
    return jsonify({"status": "ok"}), 200


@bp.get("/health/ready")
@skip_auth
def health_ready():
    """Readiness probe checking the user store."""
    try:
        db.session.execute(text("SELECT 1"))
        details = {"db": "ok"}
        ok = True
    except SQLAlchemyError:
        details = {"db": "error"}
        ok = False

    payload = {
        "status": "ok" if ok else "error",
        "details": details,
        "timestamp": utc_now_isoformat(),
    }
    return jsonify(payload), 200 if ok else 503
