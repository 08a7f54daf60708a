"""User CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from users_backend.api.dependencies import get_user_service
from users_backend.api.models import UserCreate, UserUpdate
from users_backend.api.services import UserService
from users_backend.api.validation import validated_body, validated_path_id

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
def get_all_users(
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """List every user."""

    return user_service.find_all().to_json_response()


@router.get("/{id}")
def get_user_by_id(
    user_id: int = validated_path_id("id"),
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Fetch a single user."""

    return user_service.find_by_id(user_id).to_json_response()


@router.post("")
def create_user(
    payload: UserCreate = validated_body(UserCreate),
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Create a user from ``{name, email}``."""

    return user_service.create(payload).to_json_response()


@router.put("/{id}")
def update_user(
    user_id: int = validated_path_id("id"),
    payload: UserUpdate = validated_body(UserUpdate),
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Replace the supplied fields of an existing user."""

    return user_service.update(user_id, payload).to_json_response()


@router.delete("/{id}")
def delete_user(
    user_id: int = validated_path_id("id"),
    user_service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Remove a user."""

    return user_service.delete(user_id).to_json_response()
