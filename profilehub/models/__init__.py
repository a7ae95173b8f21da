"""SQLModel database models."""

from profilehub.models.user import User

__all__ = [
    "User",
]
