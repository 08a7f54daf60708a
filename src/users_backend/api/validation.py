"""Request validation run ahead of route handlers.

The pure helpers (:func:`validate_body`, :func:`parse_positive_int`) either
return a normalized value or raise :class:`RequestValidationFailure`, which
carries the 400 envelope. The ``validated_*`` factories wrap them as FastAPI
dependencies so a failure short-circuits the handler.
"""

from __future__ import annotations

import logging
import re
from typing import Any, TypeVar

from fastapi import Depends, Request, status
from pydantic import BaseModel, ValidationError

from users_backend.api.models import ServiceResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

POSITIVE_INT_PATTERN = re.compile(r"[0-9]+")
# Upper bound of the integer primary key column.
MAX_ID = 2**31 - 1


class RequestValidationFailure(Exception):
    """Raised when inbound data does not satisfy its declared schema."""

    def __init__(self, response: ServiceResponse[None]) -> None:
        super().__init__(response.message)
        self.response = response


def _bad_request(message: str) -> RequestValidationFailure:
    return RequestValidationFailure(
        ServiceResponse.failure(message, status_code=status.HTTP_400_BAD_REQUEST)
    )


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Join pydantic errors into ``"field: problem; field: problem"``."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        if error["type"] == "missing":
            problem = "Required"
        elif error["type"] == "value_error":
            problem = str(error["ctx"]["error"])
        else:
            problem = error["msg"]
        parts.append(f"{location}: {problem}" if location else problem)
    return "; ".join(parts)


def validate_body(schema: type[ModelT], payload: Any) -> ModelT:
    """Validate ``payload`` against ``schema`` and return the normalized model."""
    if not isinstance(payload, dict):
        raise _bad_request("Validation error: Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        message = f"Validation error: {describe_validation_errors(exc.errors())}"
        logger.warning("%s rejected: %s", schema.__name__, message)
        raise _bad_request(message) from exc


def parse_positive_int(raw: str, param: str) -> int:
    """Parse a path parameter that must be a positive integer."""
    digits = raw.lstrip("0")
    if (
        POSITIVE_INT_PATTERN.fullmatch(raw) is None
        or not digits
        or len(digits) > len(str(MAX_ID))
        or int(digits) > MAX_ID
    ):
        logger.warning("Rejected %s path parameter %r", param, raw)
        raise _bad_request(f"Invalid {param} format. Must be a positive integer.")
    return int(digits)


def validated_body(schema: type[ModelT]) -> Any:
    """Dependency that parses the JSON body into ``schema``."""

    async def dependency(request: Request) -> ModelT:
        try:
            payload = await request.json()
        except ValueError as exc:
            raise _bad_request("Validation error: Request body must be a JSON object") from exc
        return validate_body(schema, payload)

    return Depends(dependency)


def validated_path_id(param: str = "id") -> Any:
    """Dependency that parses a positive integer path parameter.

    The parsed value is returned and also stored on ``request.state``.
    """

    def dependency(request: Request) -> int:
        value = parse_positive_int(request.path_params[param], param)
        setattr(request.state, param, value)
        return value

    return Depends(dependency)


__all__ = [
    "RequestValidationFailure",
    "describe_validation_errors",
    "parse_positive_int",
    "validate_body",
    "validated_body",
    "validated_path_id",
]
