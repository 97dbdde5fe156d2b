"""Application-level representation of an authenticated principal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class AuthenticatedPrincipal:
    """Immutable snapshot of the authenticated subject for the current request.

    The OTP services only need the subject id; the token claims are not
    interpreted any further.
    """

    subject_id: int
    identifier: str
    email: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        email = (self.email or "").strip() if isinstance(self.email, str) else ""
        object.__setattr__(self, "email", email or None)

    @property
    def id(self) -> int:
        return self.subject_id

    @property
    def is_authenticated(self) -> bool:  # pragma: no cover - Flask-Login interface
        return True

    @property
    def is_active(self) -> bool:  # pragma: no cover - Flask-Login interface
        return True

    @property
    def is_anonymous(self) -> bool:  # pragma: no cover - Flask-Login interface
        return False

    def get_id(self) -> str:  # pragma: no cover - Flask-Login interface
        return str(self.subject_id)


__all__ = ["AuthenticatedPrincipal"]
