"""Repository helpers for working with users."""

from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from users_backend.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`.

    Every method issues exactly one parameterized statement.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[UserSchema]:
        """Return every user ordered by ID."""
        stmt = select(UserSchema).order_by(UserSchema.id)
        return list(self._session.scalars(stmt))

    def get_by_id(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        stmt = select(UserSchema).where(UserSchema.id == user_id)
        return self._session.scalar(stmt)

    def add(self, *, name: str, email: str) -> UserSchema:
        """Insert a new user and return the stored row."""
        stmt = insert(UserSchema).values(name=name, email=email).returning(UserSchema)
        return self._session.scalars(stmt).one()

    def update(self, user_id: int, changes: dict[str, Any]) -> UserSchema | None:
        """Apply ``changes`` to the user row, returning ``None`` if it is absent."""
        if not changes:
            return self.get_by_id(user_id)
        stmt = (
            update(UserSchema)
            .where(UserSchema.id == user_id)
            .values(**changes)
            .returning(UserSchema)
        )
        return self._session.scalars(stmt).one_or_none()

    def delete(self, user_id: int) -> bool:
        """Remove the user row; report whether anything was deleted."""
        stmt = delete(UserSchema).where(UserSchema.id == user_id).returning(UserSchema.id)
        return self._session.scalars(stmt).one_or_none() is not None
