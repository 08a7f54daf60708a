"""Repositories wrapping SQL access per table."""

from users_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
