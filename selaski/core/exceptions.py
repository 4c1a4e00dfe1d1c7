"""
Ошибки предметной области и их HTTP-статусы.

Сервисы выбрасывают эти исключения, HTTP-слой переводит их в конверт
ответа через selaski.api.responses.classify_error.
"""

from typing import Dict, List, Optional


class AppError(Exception):
    """Базовый класс ошибок сервиса."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Некорректные или отсутствующие входные данные.
    Maps to: HTTP 400 Bad Request

    Attributes:
        errors (List[Dict[str, str]]): Все нарушенные поля в виде
            {"field": ..., "message": ...}.
    """

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None and self.errors:
            details = "; ".join(f"{e['field']}: {e['message']}" for e in self.errors)
            message = f"{self.default_message}: {details}"
        super().__init__(message)


class NotFoundError(AppError):
    """Запрошенная сущность не существует.
    Maps to: HTTP 404 Not Found"""

    status_code = 404
    default_message = "Resource not found"


class ConflictError(AppError):
    """Нарушение уникальности (например, email уже занят).
    Maps to: HTTP 409 Conflict"""

    status_code = 409
    default_message = "Resource already exists"


class UnhandledError(AppError):
    """Любая неклассифицированная ошибка.
    Maps to: HTTP 500 Internal Server Error"""

    status_code = 500
    default_message = "Internal server error"
