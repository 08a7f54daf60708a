"""User CRUD operations wrapped in :class:`ServiceResponse` envelopes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from users_backend.api.models import (
    ServiceResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from users_backend.database import DatabaseService, UserRepository

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
EMAIL_IN_USE = "Email already in use"


def _not_found() -> ServiceResponse[Any]:
    return ServiceResponse.failure(USER_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)


class UserService:
    """Runs each operation in its own session scope on the injected database.

    Storage errors never escape: a unique violation becomes a 409 envelope,
    anything else a 500 envelope.
    """

    def __init__(self, database: DatabaseService) -> None:
        self._database = database

    def _execute(
        self,
        work: Callable[[UserRepository], ServiceResponse[Any]],
        *,
        action: str,
    ) -> ServiceResponse[Any]:
        try:
            with self._database.session() as session:
                return work(UserRepository(session))
        except IntegrityError:
            logger.warning("Integrity error while %s", action)
            return ServiceResponse.failure(EMAIL_IN_USE, status_code=status.HTTP_409_CONFLICT)
        except SQLAlchemyError:
            logger.exception("Storage failure while %s", action)
            return ServiceResponse.failure(
                f"An error occurred while {action}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    def find_all(self) -> ServiceResponse[list[UserResponse]]:
        def work(repository: UserRepository) -> ServiceResponse[Any]:
            users = [UserResponse.model_validate(user) for user in repository.list_all()]
            return ServiceResponse.ok("Users retrieved successfully", users)

        return self._execute(work, action="retrieving users")

    def find_by_id(self, user_id: int) -> ServiceResponse[UserResponse]:
        def work(repository: UserRepository) -> ServiceResponse[Any]:
            user = repository.get_by_id(user_id)
            if user is None:
                return _not_found()
            return ServiceResponse.ok(
                "User retrieved successfully", UserResponse.model_validate(user)
            )

        return self._execute(work, action="retrieving user")

    def create(self, payload: UserCreate) -> ServiceResponse[UserResponse]:
        def work(repository: UserRepository) -> ServiceResponse[Any]:
            user = repository.add(name=payload.name, email=payload.email)
            logger.info("Created user %s", user.id)
            return ServiceResponse.ok(
                "User created successfully",
                UserResponse.model_validate(user),
                status_code=status.HTTP_201_CREATED,
            )

        return self._execute(work, action="creating user")

    def update(self, user_id: int, payload: UserUpdate) -> ServiceResponse[UserResponse]:
        def work(repository: UserRepository) -> ServiceResponse[Any]:
            user = repository.update(user_id, payload.changes())
            if user is None:
                return _not_found()
            logger.info("Updated user %s", user_id)
            return ServiceResponse.ok(
                "User updated successfully", UserResponse.model_validate(user)
            )

        return self._execute(work, action="updating user")

    def delete(self, user_id: int) -> ServiceResponse[None]:
        def work(repository: UserRepository) -> ServiceResponse[Any]:
            if not repository.delete(user_id):
                return _not_found()
            logger.info("Deleted user %s", user_id)
            return ServiceResponse.ok("User deleted successfully")

        return self._execute(work, action="deleting user")
