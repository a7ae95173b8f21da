"""Database repositories."""

from profilehub.db.repositories.user import UserRepository

__all__ = [
    "UserRepository",
]
