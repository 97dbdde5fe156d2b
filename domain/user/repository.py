from __future__ import annotations

from datetime import datetime
from typing import Protocol


class UserRepository(Protocol):
    def record_otp_request(self, user_id: int, requested_at: datetime) -> bool:
        """Record that *user_id* asked for a one-time code.

        Returns ``False`` when the user does not exist; that case is not an
        error for the caller.
        """
        ...
