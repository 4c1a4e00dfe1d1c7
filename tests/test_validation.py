from datetime import datetime, timezone

import pytest

from selaski.core.exceptions import ValidationError
from selaski.services.validation import (
    errors_from_pydantic,
    validate_message_filters,
    validate_message_input,
    validate_user_input,
)


def _fields(exc_info):
    return {e["field"] for e in exc_info.value.errors}


def test_valid_user_input():
    user = validate_user_input({"name": "Juan", "email": "juan@example.com"})
    assert user.name == "Juan"
    assert user.email == "juan@example.com"


def test_user_input_reports_all_fields():
    with pytest.raises(ValidationError) as exc_info:
        validate_user_input({"name": "", "email": "no-es-un-email"})
    assert _fields(exc_info) == {"name", "email"}
    assert exc_info.value.status_code == 400
    assert "name" in exc_info.value.message
    assert "email" in exc_info.value.message


def test_user_input_blank_name():
    with pytest.raises(ValidationError) as exc_info:
        validate_user_input({"name": "   ", "email": "juan@example.com"})
    assert _fields(exc_info) == {"name"}


def test_user_input_missing_fields():
    with pytest.raises(ValidationError) as exc_info:
        validate_user_input({})
    assert _fields(exc_info) == {"name", "email"}


def test_body_must_be_object():
    with pytest.raises(ValidationError) as exc_info:
        validate_user_input(["Juan", "juan@example.com"])
    assert _fields(exc_info) == {"body"}


def test_valid_message_input_uses_camel_case():
    message = validate_message_input({"content": "hola", "userId": 1})
    assert message.content == "hola"
    assert message.user_id == 1


def test_message_input_user_id_must_be_integer():
    with pytest.raises(ValidationError) as exc_info:
        validate_message_input({"content": "", "userId": "1"})
    assert _fields(exc_info) == {"content", "userId"}


def test_filters_parsed():
    filters = validate_message_filters(content="hola", after="2024-01-01T00:00:00.000Z", limit="5")
    assert filters.content == "hola"
    assert filters.after == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert filters.limit == 5


def test_filters_empty_strings_ignored():
    filters = validate_message_filters(content="", after="", limit="")
    assert filters.content is None
    assert filters.after is None
    assert filters.limit is None


@pytest.mark.parametrize("limit", ["0", "-3", "dos"])
def test_filters_invalid_limit(limit):
    with pytest.raises(ValidationError) as exc_info:
        validate_message_filters(limit=limit)
    assert _fields(exc_info) == {"limit"}


@pytest.mark.parametrize("after", ["ayer", "1700000000", "1700000000.5"])
def test_filters_invalid_after(after):
    with pytest.raises(ValidationError) as exc_info:
        validate_message_filters(after=after)
    assert _fields(exc_info) == {"after"}


def test_errors_from_pydantic_strips_location():
    errors = errors_from_pydantic([
        {"loc": ("body", "email"), "msg": "bad email"},
        {"loc": ("path", "user_id"), "msg": "Input should be a valid integer"},
        {"loc": ("body",), "msg": "Field required"},
    ])
    assert errors == [
        {"field": "email", "message": "bad email"},
        {"field": "user_id", "message": "Input should be a valid integer"},
        {"field": "body", "message": "Field required"},
    ]
