"""Liveness endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from users_backend.api.models import ServiceResponse

router = APIRouter(prefix="/health-check", tags=["health"])


@router.get("")
def health_check() -> JSONResponse:
    """Return 200 while the process is up."""

    return ServiceResponse.ok("Service is healthy").to_json_response()
