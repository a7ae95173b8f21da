"""Business logic services."""

from profilehub.services.user_service import UserService

__all__ = [
    "UserService",
]
