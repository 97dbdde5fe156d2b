from __future__ import annotations

from flask import current_app, jsonify

from application.otp import OTPRequestService, OTPVerificationService
from domain.otp.exceptions import (
    CodeGenerationError,
    DispatchFailedError,
    InvalidAddressError,
    OTPExpiredError,
)
from infrastructure.user_repository import SqlAlchemyUserRepository

from . import bp
from ..auth import get_current_principal, jwt_required
from ..extensions import db


def _request_service() -> OTPRequestService:
    extensions = current_app.extensions
    return OTPRequestService(
        otp_settings=extensions["otp_settings"],
        dispatcher=extensions["otp_dispatcher"],
        user_repository=SqlAlchemyUserRepository(db.session),
        clock=extensions["otp_clock"],
    )


def _verification_service() -> OTPVerificationService:
    extensions = current_app.extensions
    return OTPVerificationService(
        otp_settings=extensions["otp_settings"],
        clock=extensions["otp_clock"],
    )


@bp.post("/otp/request/<string:address>")
@jwt_required
@bp.doc(
    summary="Send a one-time code to an email address",
    responses={
        "200": {"description": "The code was generated and handed to the mail transport."},
        "400": {"description": "Malformed address or mail transport failure."},
        "401": {"description": "Missing or invalid bearer token."},
    },
)
def api_otp_request(address: str):
    principal = get_current_principal()
    user_id = principal.subject_id if principal else None

    try:
        result = _request_service().request_otp(address, user_id=user_id)
    except InvalidAddressError as exc:
        return jsonify({"error": str(exc)}), 400
    except DispatchFailedError as exc:
        return jsonify({"error": exc.reason}), 400
    except CodeGenerationError:
        return jsonify({"error": "Internal Server Error"}), 500

    return jsonify(
        {
            "message": result.message,
            "email": result.email,
            "code": result.display_code,
            "expires_in": result.expires_in,
        }
    )


@bp.post("/otp/verify/<int:code>")
@jwt_required
@bp.doc(
    summary="Verify a one-time code against the current time window",
    responses={
        "200": {"description": "The code matches the current window."},
        "400": {"description": "Wrong code or the window has elapsed."},
        "401": {"description": "Missing or invalid bearer token."},
    },
)
def api_otp_verify(code: int):
    principal = get_current_principal()
    user_id = principal.subject_id if principal else None

    try:
        result = _verification_service().verify_otp(code, user_id=user_id)
    except OTPExpiredError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({"message": result.message})
