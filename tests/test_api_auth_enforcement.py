from flask import Flask
import pytest

from webapp.api.blueprint import AuthEnforcedBlueprint, declares_auth
from webapp.auth import jwt_required, skip_auth


def _register_routes(blueprint):
    app = Flask(__name__)
    app.register_blueprint(blueprint)
    return app


def test_route_registration_requires_auth_decorator():
    bp = AuthEnforcedBlueprint("test", __name__)

    with pytest.raises(RuntimeError):

        @bp.get("/forbidden")
        def forbidden_route():
            return "nope"


def test_route_registration_allows_skip_auth():
    bp = AuthEnforcedBlueprint("test", __name__)

    @bp.get("/health")
    @skip_auth
    def health_route():
        return "ok"

    app = _register_routes(bp)
    assert app.test_client().get("/health").data == b"ok"


def test_route_registration_allows_jwt_required():
    bp = AuthEnforcedBlueprint("test", __name__)

    @bp.post("/secure")
    @jwt_required
    def secure_route():
        return "ok"

    _register_routes(bp)


def test_declares_auth_follows_wrapped_chain():
    from functools import wraps

    @jwt_required
    def inner():
        return "ok"

    @wraps(inner)
    def outer():
        return inner()

    outer.__dict__.pop("_auth_enforced", None)

    assert declares_auth(outer) is True
    assert declares_auth(lambda: None) is False


def test_all_api_views_declare_auth(app):
    for endpoint, view in app.view_functions.items():
        if endpoint.startswith("api."):
            assert declares_auth(view), endpoint
