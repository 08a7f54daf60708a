"""Service layer for API-specific business logic."""

from users_backend.api.services.user import UserService

__all__ = ["UserService"]
