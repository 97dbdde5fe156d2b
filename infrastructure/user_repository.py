import logging
from datetime import datetime

from sqlalchemy import select

from core.models.user import User as UserModel
from domain.user.repository import UserRepository


logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session):
        self.session = session

    def record_otp_request(self, user_id: int, requested_at: datetime) -> bool:
        """ワンタイムコードの要求日時を更新"""
        stmt = select(UserModel).filter_by(id=user_id)
        model = self.session.execute(stmt).scalar_one_or_none()
        if model is None:
            logger.debug(
                "OTP request recorded for unknown user",
                extra={"event": "user.otp_request.missing", "user_id": user_id},
            )
            return False

        model.otp_requested_at = requested_at
        self.session.commit()
        return True
