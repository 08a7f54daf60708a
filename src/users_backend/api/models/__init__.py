"""Models used for API request and response payloads."""

from users_backend.api.models.response import ServiceResponse, is_success_status
from users_backend.api.models.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "ServiceResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "is_success_status",
]
