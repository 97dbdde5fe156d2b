"""ORM models for the user store."""

from .user import User

__all__ = ["User"]
