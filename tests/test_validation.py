"""Tests for the request validation helpers."""

from __future__ import annotations

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from users_backend.api import create_api
from users_backend.api.models import UserCreate, UserUpdate
from users_backend.api.validation import (
    MAX_ID,
    RequestValidationFailure,
    describe_validation_errors,
    parse_positive_int,
    validate_body,
    validated_path_id,
)
from users_backend.database import DatabaseService
from users_backend.settings import BackendSettings


def test_validate_body_returns_normalized_model() -> None:
    result = validate_body(UserCreate, {"name": " Ada ", "email": "ada@example.com"})

    assert result == UserCreate(name="Ada", email="ada@example.com")


def test_validate_body_failure_carries_400_envelope() -> None:
    with pytest.raises(RequestValidationFailure) as exc_info:
        validate_body(UserCreate, {"name": "Ada", "email": "invalid-email"})

    response = exc_info.value.response
    assert response.success is False
    assert response.status_code == 400
    assert response.response_object is None
    assert response.message == "Validation error: email: Invalid email format"


def test_validate_body_rejects_non_mapping() -> None:
    with pytest.raises(RequestValidationFailure) as exc_info:
        validate_body(UserCreate, ["Ada", "ada@example.com"])

    assert "must be a JSON object" in exc_info.value.response.message


def test_validate_body_reports_wrong_type() -> None:
    with pytest.raises(RequestValidationFailure) as exc_info:
        validate_body(UserCreate, {"name": 42, "email": "ada@example.com"})

    assert exc_info.value.response.message.startswith("Validation error: name: ")


def test_update_payload_changes_skip_missing_and_null_fields() -> None:
    payload = validate_body(UserUpdate, {"name": "Ada", "email": None})

    assert payload.changes() == {"name": "Ada"}


def test_describe_validation_errors_drops_body_prefix() -> None:
    errors = [
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
        {"type": "string_type", "loc": ("body",), "msg": "Input should be a valid string"},
    ]

    assert describe_validation_errors(errors) == (
        "name: Required; Input should be a valid string"
    )


@pytest.mark.parametrize(("raw", "expected"), [("1", 1), ("42", 42), ("007", 7)])
def test_parse_positive_int_accepts_digits(raw: str, expected: int) -> None:
    assert parse_positive_int(raw, "id") == expected


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "", "1e3", " 5", "+5", "1_000"])
def test_parse_positive_int_rejects(raw: str) -> None:
    with pytest.raises(RequestValidationFailure) as exc_info:
        parse_positive_int(raw, "userId")

    response = exc_info.value.response
    assert response.status_code == 400
    assert response.message == "Invalid userId format. Must be a positive integer."


def test_parse_positive_int_accepts_column_maximum() -> None:
    assert parse_positive_int(str(MAX_ID), "id") == MAX_ID
    assert parse_positive_int("000" + str(MAX_ID), "id") == MAX_ID


@pytest.mark.parametrize("raw", [str(MAX_ID + 1), "9" * 20, "9" * 5000, "0" * 5000])
def test_parse_positive_int_rejects_out_of_range(raw: str) -> None:
    with pytest.raises(RequestValidationFailure) as exc_info:
        parse_positive_int(raw, "id")

    assert exc_info.value.response.message == "Invalid id format. Must be a positive integer."


def test_validated_path_id_stores_parsed_value_on_request_state(
    database: DatabaseService, test_settings: BackendSettings
) -> None:
    app = create_api(database, settings=test_settings)
    seen: dict[str, object] = {}

    def echo(request: Request, item_id: int = validated_path_id("id")) -> dict[str, int]:
        seen["state_id"] = request.state.id
        return {"id": item_id}

    app.add_api_route("/items/{id}", echo)

    with TestClient(app) as client:
        response = client.get("/items/0042")

    assert response.status_code == 200
    assert response.json() == {"id": 42}
    assert seen["state_id"] == 42
    assert type(seen["state_id"]) is int
