"""SQLAlchemy table mappings."""

from users_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
