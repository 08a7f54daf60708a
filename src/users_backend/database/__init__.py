"""Database connectivity helpers and configuration objects."""

from users_backend.database.base import BaseSchema
from users_backend.database.dependencies import get_database
from users_backend.database.repositories import UserRepository
from users_backend.database.schemas import UserSchema
from users_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
]
