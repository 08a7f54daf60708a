"""Tests for the response envelope."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from users_backend.api.models import ServiceResponse, UserResponse


def test_ok_defaults_to_200() -> None:
    response = ServiceResponse.ok("done")

    assert response.success is True
    assert response.status_code == 200
    assert response.response_object is None


def test_failure_defaults_to_400() -> None:
    response = ServiceResponse.failure("bad")

    assert response.success is False
    assert response.status_code == 400


@pytest.mark.parametrize(
    ("success", "status_code"), [(True, 404), (True, 500), (False, 200), (False, 201)]
)
def test_success_must_match_status(success: bool, status_code: int) -> None:
    with pytest.raises(ValidationError):
        ServiceResponse(success=success, message="x", status_code=status_code)


def test_envelope_is_immutable() -> None:
    response = ServiceResponse.ok("done")

    with pytest.raises(ValidationError):
        response.message = "changed"  # type: ignore[misc]


def test_json_response_mirrors_status_and_uses_camel_case() -> None:
    user = UserResponse(id=1, name="Ada", email="ada@example.com")
    rendered = ServiceResponse.ok("created", user, status_code=201).to_json_response()

    assert rendered.status_code == 201
    assert json.loads(rendered.body) == {
        "success": True,
        "message": "created",
        "responseObject": {"id": 1, "name": "Ada", "email": "ada@example.com"},
        "statusCode": 201,
    }
