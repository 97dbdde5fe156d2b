"""Centralized HTTP error handling returning JSON payloads."""
from flask import current_app, jsonify, request
from flask_babel import gettext as _
from werkzeug.exceptions import InternalServerError, default_exceptions


def _json_error(error, *, is_server_error: bool):
    code = getattr(error, "code", None) or (500 if is_server_error else 400)
    message_key = getattr(error, "name", None) or (
        "Internal Server Error" if is_server_error else "Error"
    )

    if is_server_error:
        current_app.logger.error(
            "%s %s (%s)", code, request.path, request.remote_addr, exc_info=error
        )
    else:
        current_app.logger.warning("%s %s (%s)", code, request.path, request.remote_addr)

    response = jsonify({"status": "error", "code": code, "message": _(message_key)})
    response.status_code = code
    return response


def register_error_handlers(app):
    """Register global error handlers.

    Client errors and server errors are both rendered as
    ``{"status", "code", "message"}``; server errors never expose details.
    """

    @app.errorhandler(403)
    @app.errorhandler(404)
    @app.errorhandler(405)
    def handle_client_errors(error):
        return _json_error(error, is_server_error=False)

    def handle_server_errors(error):
        return _json_error(error, is_server_error=True)

    server_error_status_codes = [
        status_code for status_code in default_exceptions if 500 <= status_code < 600
    ]

    for status_code in server_error_status_codes:
        app.register_error_handler(status_code, handle_server_errors)

    app.register_error_handler(InternalServerError, handle_server_errors)

    @app.errorhandler(401)
    def handle_unauthorized(error):
        return (
            jsonify(
                {
                    "status": "unauthorized",
                    "code": 401,
                    "message": _("Authentication required."),
                }
            ),
            401,
        )
