"""
User endpoints for API v1.

``GET /users/`` lists every stored user.  ``POST /users/`` saves a
user and answers with an empty 200 response; the assigned identifier
is not returned to the caller.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from user_api.app.api.deps import get_user_service
from user_api.app.models.user import User
from user_api.app.schemas.user import UserCreate, UserRead
from user_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/", response_model=List[UserRead])
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users."""
    return [UserRead.model_validate(user) for user in service.list_users()]


@router.post("/", status_code=status.HTTP_200_OK, response_class=Response)
def add_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> Response:
    """Save a user.

    The response body is empty even though the saved record, including
    its new identifier, is available here.
    """
    service.save_user(User(**user.model_dump()))
    return Response(status_code=status.HTTP_200_OK)
