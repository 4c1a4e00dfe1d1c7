# Пользователи и их сообщения
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from selaski.api.responses import success_response
from selaski.core.database import get_db
from selaski.schemas.api_response import ApiResponse
from selaski.schemas.message import MessageResponse
from selaski.schemas.user import UserResponse as UserSchema
from selaski.services.user_service import UserService
from selaski.services.validation import validate_message_filters, validate_user_input

router = APIRouter(
    tags=["users"],
    responses={404: {"description": "Not found"}},
)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("", response_model=ApiResponse[UserSchema], status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Dict[str, Any] = Body(..., examples=[{"name": "Juan Pérez", "email": "juan@example.com"}]),
    service: UserService = Depends(get_user_service),
):
    """Создает нового пользователя.

    Args:
        payload (dict): Тело запроса {"name", "email"}.
        service (UserService): Сервис пользователей (внедряется автоматически).

    Returns:
        ApiResponse[UserResponse]: Конверт с созданным пользователем.

    Raises:
        ValidationError: 400 при пустом имени или некорректном email.
        ConflictError: 409 если email уже занят.

    Examples:
        >>> # POST /users
        >>> {"name": "Juan", "email": "juan@example.com"}
        >>> # Response: {"success": true, "message": "User created successfully", "data": {...}}
    """
    user_in = validate_user_input(payload)
    user = service.create_user(name=user_in.name, email=user_in.email)
    return success_response(UserSchema.model_validate(user), "User created successfully")


@router.get("/{user_id}/messages", response_model=ApiResponse[List[MessageResponse]])
def read_user_messages(
    user_id: int,
    content: Optional[str] = Query(None, description="Подстрока в тексте (без учёта регистра)"),
    after: Optional[str] = Query(None, description="ISO-8601, сообщения с createdAt >= after"),
    limit: Optional[str] = Query(None, description="Максимальное количество сообщений (>= 1)"),
    service: UserService = Depends(get_user_service),
):
    """Получает сообщения пользователя, новые первыми.

    Raises:
        ValidationError: 400 при некорректных фильтрах.
        NotFoundError: 404 если пользователь не найден.

    Examples:
        >>> # GET /users/1/messages?content=hola&limit=2
    """
    filters = validate_message_filters(content=content, after=after, limit=limit)
    messages = service.list_messages_for_user(user_id, filters)
    return success_response(
        [MessageResponse.model_validate(m) for m in messages],
        "Messages retrieved successfully",
    )
