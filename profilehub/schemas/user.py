"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from profilehub.core.config import settings


# Sub-document entries
class ProfileEntry(BaseModel):
    """Contact block; only the telephone number is required."""
    photo_url: Optional[str] = None
    about_me: Optional[str] = None
    telNo: str
    address: Optional[str] = None


class EducationEntry(BaseModel):
    school_name: Optional[str] = None
    course: Optional[str] = None


class WorkExperienceEntry(BaseModel):
    company: Optional[str] = None
    position: Optional[str] = None
    year: Optional[str] = None
    job_description: Optional[str] = None


class SkillEntry(BaseModel):
    list_skills: Optional[str] = None
    skills_level: Optional[float] = None


class PortfolioEntry(BaseModel):
    image_url: Optional[str] = None
    project_title: Optional[str] = None
    project_url: Optional[str] = None


# Request schemas
class SignupRequest(BaseModel):
    """Schema for account creation. Presence is checked by the service."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = Field(None, alias="userPassword")


class LoginRequest(BaseModel):
    """Schema for user login."""
    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    password: Optional[str] = Field(None, alias="userPassword")


# Full-replacement updates: an omitted list empties the field
class ProfileUpdate(BaseModel):
    profile: Optional[List[ProfileEntry]] = None


class EducationUpdate(BaseModel):
    education: Optional[List[EducationEntry]] = None


class WorkExperienceUpdate(BaseModel):
    work_experience: Optional[List[WorkExperienceEntry]] = None


class SkillsUpdate(BaseModel):
    skills: Optional[List[SkillEntry]] = None


class PortfolioUpdate(BaseModel):
    portfolio: Optional[List[PortfolioEntry]] = None


# Response schemas
class UserResponse(BaseModel):
    """Schema for a stored user record in API responses."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    first_name: str
    last_name: str
    username: str
    user_password: Optional[str] = Field(None, alias="userPassword")
    deleted: bool
    profile: List[ProfileEntry] = []
    education: List[EducationEntry] = []
    work_experience: List[WorkExperienceEntry] = []
    skills: List[SkillEntry] = []
    portfolio: List[PortfolioEntry] = []
    created_at: datetime
    updated_at: datetime


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserResponse


class DeleteResponse(BaseModel):
    message: str = "User soft deleted"
    user: UserResponse


class UserListResponse(BaseModel):
    allUsers: List[UserResponse]


def to_user_response(user) -> UserResponse:
    """Build the response for a stored user, blanking the hash when redaction is on."""
    response = UserResponse.model_validate(user.model_dump())
    if settings.REDACT_PASSWORD_HASH:
        response.user_password = None
    return response
