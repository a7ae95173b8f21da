"""
Authentication endpoints.

Handles account signup and login.
"""

from fastapi import APIRouter, Depends, status

from profilehub.api.dependencies import get_user_service
from profilehub.schemas.user import LoginRequest, LoginResponse, SignupRequest, UserResponse, to_user_response
from profilehub.services.user_service import UserService

router = APIRouter()


@router.post("/signup",
             summary="Create an account.",
             response_model=UserResponse,
             status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, service: UserService = Depends(get_user_service)):
    """
    Register a new user.

    Args:
        data: first_name, last_name, username, userPassword
        service: User service

    Returns:
        Created user record

    Raises:
        ValidationError 400: If a field is missing
        DuplicateUsernameError 400: If the username is taken
    """
    return to_user_response(service.signup(data))


@router.post("/login",
             summary="Check username and password.",
             response_model=LoginResponse)
def login(data: LoginRequest, service: UserService = Depends(get_user_service)):
    """
    Authenticate a user. No token is issued; the record itself is returned.

    Unknown and soft-deleted accounts both answer 404.
    """
    user = service.login(data)
    return LoginResponse(user=to_user_response(user))
