"""Route definitions for public HTTP endpoints."""

from users_backend.api.routers.health import router as health_router
from users_backend.api.routers.users import router as users_router

__all__ = ["health_router", "users_router"]
