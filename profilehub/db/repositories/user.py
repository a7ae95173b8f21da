"""
User repository.

Document-store style access to the users table: insert, find-one by
filter, find-by-id-and-update returning the updated record.
"""

from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from profilehub.core.exceptions import DuplicateUsernameError, StoreError
from profilehub.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: User instance to insert

        Returns:
            Stored user

        Raises:
            DuplicateUsernameError: If the username index rejects the insert
            StoreError: On any other persistence failure
        """
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateUsernameError() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(details={"reason": exc.__class__.__name__}) from exc
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID, soft-deleted or not.

        Returns:
            User instance if found, None otherwise
        """
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as exc:
            raise StoreError(details={"reason": exc.__class__.__name__}) from exc

    def find_one(self, **filters: Any) -> Optional[User]:
        """
        Get the first user matching all equality filters.

        Example:
            repository.find_one(username="jdoe")
        """
        statement = select(User)
        for field, value in filters.items():
            statement = statement.where(getattr(User, field) == value)
        try:
            return self.session.exec(statement).first()
        except SQLAlchemyError as exc:
            raise StoreError(details={"reason": exc.__class__.__name__}) from exc

    def get_by_username(self, username: str) -> Optional[User]:
        return self.find_one(username=username)

    def list_active(self) -> list[User]:
        """All users not soft-deleted, in store order."""
        statement = select(User).where(User.deleted == False)  # noqa: E712
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            raise StoreError(details={"reason": exc.__class__.__name__}) from exc

    def find_by_id_and_update(self, user_id: str, values: dict[str, Any]) -> Optional[User]:
        """
        Set the given fields on one user and return the updated record.

        Args:
            user_id: User ID
            values: Field name to new value

        Returns:
            Updated user, or None if no user has that ID
        """
        user = self.get_by_id(user_id)
        if user is None:
            return None
        for field, value in values.items():
            setattr(user, field, value)
        self.session.add(user)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(details={"reason": exc.__class__.__name__}) from exc
        self.session.refresh(user)
        return user
