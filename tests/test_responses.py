import json
import logging

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from selaski.api.responses import api_response, classify_error, error_response, success_response
from selaski.core.exceptions import (
    ConflictError,
    NotFoundError,
    UnhandledError,
    ValidationError,
)


def test_success_envelope():
    assert success_response({"id": 1}, "ok") == {"success": True, "message": "ok", "data": {"id": 1}}
    assert api_response(False, "fail") == {"success": False, "message": "fail", "data": None}


def test_domain_errors_pass_through():
    error = ConflictError("Email already exists")
    assert classify_error(error) is error


def test_request_validation_error_is_400():
    exc = RequestValidationError([{"loc": ("body", "email"), "msg": "bad email", "type": "value_error"}])
    error = classify_error(exc)
    assert isinstance(error, ValidationError)
    assert error.status_code == 400
    assert error.errors == [{"field": "email", "message": "bad email"}]


def test_http_exceptions():
    assert isinstance(classify_error(StarletteHTTPException(404, "Not Found")), NotFoundError)
    method_error = classify_error(StarletteHTTPException(405, "Method Not Allowed"))
    assert method_error.status_code == 405
    assert method_error.message == "Method Not Allowed"


def test_unknown_exception_is_500_without_details():
    error = classify_error(RuntimeError("connection string with password"))
    assert isinstance(error, UnhandledError)
    assert error.status_code == 500

    response = error_response(RuntimeError("connection string with password"))
    body = json.loads(response.body)
    assert response.status_code == 500
    assert body == {"success": False, "message": "Internal server error", "data": None}


def test_error_envelope_for_not_found():
    response = error_response(NotFoundError("User not found"))
    assert response.status_code == 404
    assert json.loads(response.body) == {"success": False, "message": "User not found", "data": None}


def test_unhandled_error_logged_with_traceback(caplog):
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        exc = e
    with caplog.at_level(logging.ERROR, logger="selaski.api.responses"):
        error_response(exc)
    records = [r for r in caplog.records if r.name == "selaski.api.responses"]
    assert records
    assert records[-1].levelno == logging.ERROR
    assert records[-1].exc_info is not None
    assert records[-1].exc_info[1] is exc
