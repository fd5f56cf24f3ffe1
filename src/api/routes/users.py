"""User CRUD routes.

Endpoints:
- POST /users: Create a user
- GET /users: List all users
- GET /users/{user_id}: Get one user
- PUT /users/{user_id}: Partially update a user
- DELETE /users/{user_id}: Delete a user
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status

from api.dependencies import get_user_repo
from api.models import MessageResponse, UserResponse
from domain.model.errors import EmptyPayloadError
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _is_json(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def _read_payload(request: Request) -> dict[str, Any]:
    """Decode the request body as a JSON object.

    Bodies not sent as JSON carry no data. Malformed JSON is not caught
    here; it surfaces as a 500.
    """
    if not _is_json(request):
        raise EmptyPayloadError()
    body = await request.body()
    if not body.strip():
        raise EmptyPayloadError()

    data = await request.json()
    if not data:
        raise EmptyPayloadError()
    # Arrays and scalars name no fields, so validation reports what is missing
    return data if isinstance(data, dict) else {}


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: Request, repo: UserRepository = Depends(get_user_repo)):
    """Create a new user.

    Raises:
        EmptyPayloadError: 400 when the body is empty
        ValidationError: 400 with all validation messages
        DuplicateError: 409 when the email is already used
    """
    data = await _read_payload(request)
    user = user_service.create_user(repo, data)
    return UserResponse.from_domain(user)


@router.get("", response_model=list[UserResponse])
async def list_users(repo: UserRepository = Depends(get_user_repo)):
    """List all users."""
    return [UserResponse.from_domain(u) for u in user_service.list_users(repo)]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Get a single user by ID."""
    return UserResponse.from_domain(user_service.get_user(repo, user_id))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, request: Request, repo: UserRepository = Depends(get_user_repo)):
    """Update the supplied fields of a user.

    A missing user is reported before the body is looked at.
    """
    user_service.get_user(repo, user_id)
    data = await _read_payload(request)
    user = user_service.update_user(repo, user_id, data)
    return UserResponse.from_domain(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Delete a user."""
    user_service.delete_user(repo, user_id)
    return MessageResponse(message="User deleted successfully")
