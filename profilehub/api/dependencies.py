"""
Shared API dependencies.

Reusable FastAPI dependencies for database and service access.
"""

from fastapi import Depends
from sqlmodel import Session

from profilehub.db.repositories.user import UserRepository
from profilehub.db.session import get_db
from profilehub.services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Build a UserService on the request's session."""
    return UserService(UserRepository(db))
