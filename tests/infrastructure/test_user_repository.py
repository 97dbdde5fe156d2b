from datetime import datetime, timezone

from core.models.user import User
from infrastructure.user_repository import SqlAlchemyUserRepository
from webapp.extensions import db


def test_record_otp_request_updates_user(app, user):
    repository = SqlAlchemyUserRepository(db.session)
    requested_at = datetime(2001, 9, 9, 1, 46, 40, tzinfo=timezone.utc)

    assert repository.record_otp_request(user.id, requested_at) is True

    refreshed = db.session.get(User, user.id)
    assert refreshed.otp_requested_at is not None
    assert refreshed.otp_requested_at.replace(tzinfo=None) == requested_at.replace(tzinfo=None)


def test_record_otp_request_for_unknown_user(app):
    repository = SqlAlchemyUserRepository(db.session)

    assert repository.record_otp_request(999, datetime.now(timezone.utc)) is False
