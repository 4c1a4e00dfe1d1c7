"""
Единый конверт ответа и классификация ошибок.

Все ответы сервиса имеют вид {"success": bool, "message": str, "data": ...}.
Любое исключение на границе HTTP проходит через classify_error и
превращается в одну из ошибок selaski.core.exceptions.
"""

import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from selaski.core.exceptions import (
    AppError,
    ConflictError,
    NotFoundError,
    UnhandledError,
    ValidationError,
)
from selaski.services.validation import errors_from_pydantic

logger = logging.getLogger(__name__)


def api_response(success: bool, message: str, data: Any = None) -> dict:
    return {"success": success, "message": message, "data": data}


def success_response(data: Any = None, message: str = "Operation completed successfully") -> dict:
    return api_response(True, message, data)


def classify_error(exc: Exception) -> AppError:
    """Сопоставляет исключение с ошибкой предметной области.

    Args:
        exc (Exception): Исключение, дошедшее до HTTP-слоя.

    Returns:
        AppError: ValidationError (400), NotFoundError (404),
        ConflictError (409), AppError с исходным статусом для прочих
        HTTP-ошибок Starlette или UnhandledError (500).

    Examples:
        >>> classify_error(KeyError("boom")).status_code
        500
    """
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, RequestValidationError):
        return ValidationError(errors_from_pydantic(exc.errors()))
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == 404:
            return NotFoundError(str(exc.detail))
        if exc.status_code == 409:
            return ConflictError(str(exc.detail))
        if exc.status_code in (400, 422):
            return ValidationError([], message=str(exc.detail))
        error = AppError(str(exc.detail))
        error.status_code = exc.status_code
        return error
    return UnhandledError()


def error_response(exc: Exception) -> JSONResponse:
    """JSON-ответ с конвертом ошибки; детали исключения наружу не попадают."""
    error = classify_error(exc)
    if not isinstance(exc, (AppError, RequestValidationError, StarletteHTTPException)):
        logger.exception(f"Необработанная ошибка: {type(exc).__name__}: {exc}", exc_info=exc)
    elif error.status_code >= 500:
        logger.error(f"Ошибка {error.status_code}: {error.message}")
    else:
        logger.info(f"Ошибка {error.status_code}: {error.message}")
    return JSONResponse(
        status_code=error.status_code,
        content=jsonable_encoder(api_response(False, error.message, None)),
    )


async def app_exception_handler(request, exc: Exception) -> JSONResponse:
    return error_response(exc)
