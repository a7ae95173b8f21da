"""
User endpoints.

Sub-document replacement, lookup, listing and soft deletion.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from profilehub.api.dependencies import get_user_service
from profilehub.schemas.user import (
    DeleteResponse,
    EducationUpdate,
    PortfolioUpdate,
    ProfileUpdate,
    SkillsUpdate,
    UserListResponse,
    UserResponse,
    WorkExperienceUpdate,
    to_user_response,
)
from profilehub.services.user_service import UserService

router = APIRouter()


@router.get("/", summary="List users that are not soft deleted.", response_model=UserListResponse)
def list_users(service: UserService = Depends(get_user_service)):
    users = service.list_active_users()
    return UserListResponse(allUsers=[to_user_response(u) for u in users])


@router.get("/users/{user_id}", summary="Get a user by ID.", response_model=UserResponse)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Soft-deleted users are still returned."""
    return to_user_response(service.get_user(user_id))


# A request without a body is treated like {} and empties the list
@router.post("/updateProfile/{user_id}", summary="Replace the profile list.", response_model=UserResponse)
def update_profile(user_id: str, data: Optional[ProfileUpdate] = None,
                   service: UserService = Depends(get_user_service)):
    return to_user_response(service.update_profile(user_id, data or ProfileUpdate()))


@router.post("/education/{user_id}", summary="Replace the education list.", response_model=UserResponse)
def update_education(user_id: str, data: Optional[EducationUpdate] = None,
                     service: UserService = Depends(get_user_service)):
    return to_user_response(service.update_education(user_id, data or EducationUpdate()))


@router.post("/workExperience/{user_id}", summary="Replace the work experience list.",
             response_model=UserResponse)
def update_work_experience(user_id: str, data: Optional[WorkExperienceUpdate] = None,
                           service: UserService = Depends(get_user_service)):
    return to_user_response(service.update_work_experience(user_id, data or WorkExperienceUpdate()))


@router.post("/skills/{user_id}", summary="Replace the skills list.", response_model=UserResponse)
def update_skills(user_id: str, data: Optional[SkillsUpdate] = None, service: UserService = Depends(get_user_service)):
    return to_user_response(service.update_skills(user_id, data or SkillsUpdate()))


@router.post("/portfolio/{user_id}", summary="Replace the portfolio list.", response_model=UserResponse)
def update_portfolio(user_id: str, data: Optional[PortfolioUpdate] = None,
                     service: UserService = Depends(get_user_service)):
    return to_user_response(service.update_portfolio(user_id, data or PortfolioUpdate()))


@router.delete("/delete/{user_id}", summary="Soft delete a user.", response_model=DeleteResponse)
def soft_delete(user_id: str, service: UserService = Depends(get_user_service)):
    """Sets the deleted flag; the record stays in the store. Repeat calls succeed."""
    user = service.soft_delete(user_id)
    return DeleteResponse(user=to_user_response(user))
