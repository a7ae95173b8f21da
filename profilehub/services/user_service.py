"""
User service.

Account lifecycle: signup with hashed password, login, full replacement of
profile sub-documents, soft deletion and listing of active accounts.
"""

from typing import Any, Optional, Sequence

import structlog
from pydantic import BaseModel

from profilehub.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    MissingCredentialsError,
    NotFoundError,
    ValidationError,
)
from profilehub.core.security import get_password_hash, verify_password
from profilehub.db.repositories.user import UserRepository
from profilehub.models.user import User, utc_now
from profilehub.schemas.user import (
    EducationUpdate,
    LoginRequest,
    PortfolioUpdate,
    ProfileUpdate,
    SignupRequest,
    SkillsUpdate,
    WorkExperienceUpdate,
)

logger = structlog.get_logger(__name__)


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def _to_documents(entries: Optional[Sequence[BaseModel]]) -> list[dict[str, Any]]:
    """Serialize sub-entries for storage, dropping unset keys."""
    return [entry.model_dump(exclude_none=True) for entry in entries or []]


class UserService:
    """Service for user-related business logic."""

    def __init__(self, repository: UserRepository):
        """
        Initialize service with a user repository.

        Args:
            repository: Repository bound to a session of the shared engine
        """
        self.repository = repository

    def signup(self, data: SignupRequest) -> User:
        """
        Create a new account.

        Args:
            data: Names, username and plaintext password

        Returns:
            Stored user, including the password hash

        Raises:
            ValidationError: If any field is missing or empty
            DuplicateUsernameError: If the username is taken, even by a soft-deleted account
        """
        if not all(_present(v) for v in (data.first_name, data.last_name, data.username, data.password)):
            raise ValidationError()

        if self.repository.get_by_username(data.username) is not None:
            logger.info("Signup rejected, username taken", username=data.username)
            raise DuplicateUsernameError()

        user = User(first_name=data.first_name, last_name=data.last_name, username=data.username,
                    user_password=get_password_hash(data.password), deleted=False)

        # A concurrent signup can still lose at the unique index; create() reports it
        user = self.repository.create(user)
        logger.info("User created", user_id=user.id, username=user.username)
        return user

    def login(self, data: LoginRequest) -> User:
        """
        Check credentials.

        Unknown and soft-deleted accounts fail identically.

        Raises:
            MissingCredentialsError: If username or password is missing
            NotFoundError: If no active account has this username
            InvalidCredentialsError: If the password does not match
        """
        if not (_present(data.username) and _present(data.password)):
            raise MissingCredentialsError()

        user = self.repository.get_by_username(data.username)
        if user is None or user.deleted:
            raise NotFoundError("User not found or deleted")

        if not verify_password(data.password, user.user_password):
            logger.info("Login failed, bad password", user_id=user.id)
            raise InvalidCredentialsError()

        return user

    def get_user(self, user_id: str) -> User:
        """Fetch one user by ID, soft-deleted or not."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError()
        return user

    def update_profile(self, user_id: str, data: ProfileUpdate) -> User:
        return self._replace(user_id, "profile", _to_documents(data.profile))

    def update_education(self, user_id: str, data: EducationUpdate) -> User:
        return self._replace(user_id, "education", _to_documents(data.education))

    def update_work_experience(self, user_id: str, data: WorkExperienceUpdate) -> User:
        return self._replace(user_id, "work_experience", _to_documents(data.work_experience))

    def update_skills(self, user_id: str, data: SkillsUpdate) -> User:
        return self._replace(user_id, "skills", _to_documents(data.skills))

    def update_portfolio(self, user_id: str, data: PortfolioUpdate) -> User:
        return self._replace(user_id, "portfolio", _to_documents(data.portfolio))

    def soft_delete(self, user_id: str) -> User:
        """
        Mark a user as deleted. Idempotent.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = self.repository.find_by_id_and_update(user_id, {"deleted": True, "updated_at": utc_now()})
        if user is None:
            raise NotFoundError()
        logger.info("User soft deleted", user_id=user_id)
        return user

    def list_active_users(self) -> list[User]:
        """All users whose ``deleted`` flag is false, in store order."""
        return self.repository.list_active()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _replace(self, user_id: str, field: str, documents: list[dict[str, Any]]) -> User:
        """Replace one sub-document list wholesale. The deleted flag is not checked."""
        user = self.repository.find_by_id_and_update(user_id, {field: documents, "updated_at": utc_now()})
        if user is None:
            raise NotFoundError()
        logger.info("User sub-document replaced", user_id=user_id, field=field, entries=len(documents))
        return user
