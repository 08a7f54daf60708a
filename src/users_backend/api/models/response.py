"""Uniform response envelope returned by every endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Generic, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def is_success_status(status_code: int) -> bool:
    """Return ``True`` for 2xx status codes."""
    return 200 <= status_code < 300


class ServiceResponse(BaseModel, Generic[T]):
    """Result of a service call, serialized as ``{success, message, responseObject, statusCode}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    success: bool
    message: str
    response_object: T | None = None
    status_code: int

    @model_validator(mode="after")
    def check_success_matches_status(self) -> ServiceResponse[T]:
        if self.success != is_success_status(self.status_code):
            msg = f"success={self.success} contradicts status code {self.status_code}"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(
        cls,
        message: str,
        response_object: T | None = None,
        status_code: int = status.HTTP_200_OK,
    ) -> ServiceResponse[T]:
        return cls(
            success=True,
            message=message,
            response_object=response_object,
            status_code=status_code,
        )

    @classmethod
    def failure(
        cls,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> ServiceResponse[T]:
        return cls(success=False, message=message, status_code=status_code)

    def to_json_response(self, headers: Mapping[str, str] | None = None) -> JSONResponse:
        """Render the envelope with its status code mirrored on the HTTP response."""
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(mode="json", by_alias=True),
            headers=headers,
        )
