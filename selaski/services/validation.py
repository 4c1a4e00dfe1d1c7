# Явная проверка входных данных до вызова бизнес-логики
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from selaski.core.exceptions import ValidationError
from selaski.schemas.message import MessageCreate, MessageFilters
from selaski.schemas.user import UserCreate

# Первый элемент loc у ошибок FastAPI указывает источник, а не поле
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def errors_from_pydantic(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Преобразует ошибки Pydantic/FastAPI в список {"field", "message"}.

    Args:
        errors: Результат ``exc.errors()`` у pydantic.ValidationError
            или fastapi.exceptions.RequestValidationError.

    Returns:
        List[Dict[str, str]]: По одной записи на каждое нарушенное поле.

    Examples:
        >>> errors_from_pydantic([{"loc": ("body", "email"), "msg": "bad email"}])
        [{'field': 'email', 'message': 'bad email'}]
    """
    result = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        message = str(error.get("msg", "invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        result.append({"field": field, "message": message})
    return result


def _validate(schema, payload: Any):
    if not isinstance(payload, dict):
        raise ValidationError([{"field": "body", "message": "request body must be a JSON object"}])
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(errors_from_pydantic(e.errors())) from e


def validate_user_input(payload: Any) -> UserCreate:
    """Проверка тела POST /users: name непустой, email корректный."""
    return _validate(UserCreate, payload)


def validate_message_input(payload: Any) -> MessageCreate:
    """Проверка тела POST /messages: content непустой, userId целое число."""
    return _validate(MessageCreate, payload)


def validate_message_filters(
    content: Optional[str] = None,
    after: Optional[str] = None,
    limit: Optional[str] = None,
) -> MessageFilters:
    """Проверка фильтров списка сообщений.

    Пустые строки считаются отсутствующим фильтром (``?content=&limit=``).
    """
    raw = {"content": content, "after": after, "limit": limit}
    payload = {key: value for key, value in raw.items() if value not in (None, "")}
    return _validate(MessageFilters, payload)
