"""Pydantic schemas for request/response validation."""

from profilehub.schemas.user import (
    DeleteResponse,
    EducationEntry,
    EducationUpdate,
    LoginRequest,
    LoginResponse,
    PortfolioEntry,
    PortfolioUpdate,
    ProfileEntry,
    ProfileUpdate,
    SignupRequest,
    SkillEntry,
    SkillsUpdate,
    UserListResponse,
    UserResponse,
    WorkExperienceEntry,
    WorkExperienceUpdate,
    to_user_response,
)

__all__ = [
    "DeleteResponse",
    "EducationEntry",
    "EducationUpdate",
    "LoginRequest",
    "LoginResponse",
    "PortfolioEntry",
    "PortfolioUpdate",
    "ProfileEntry",
    "ProfileUpdate",
    "SignupRequest",
    "SkillEntry",
    "SkillsUpdate",
    "UserListResponse",
    "UserResponse",
    "WorkExperienceEntry",
    "WorkExperienceUpdate",
    "to_user_response",
]
