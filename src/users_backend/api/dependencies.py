"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from users_backend.api.services import UserService
from users_backend.database import DatabaseService, get_database


def get_user_service(
    database: Annotated[DatabaseService, Depends(get_database)],
) -> UserService:
    """Build a :class:`UserService` bound to the application's database."""

    return UserService(database)


__all__ = ["get_user_service"]
