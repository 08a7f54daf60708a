"""FastAPI dependencies for database access."""

from fastapi import Request

from users_backend.database.service import DatabaseService


def get_database(request: Request) -> DatabaseService:
    """Return the database service opened by the application lifespan."""
    return request.app.state.database
