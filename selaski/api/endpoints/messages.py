# Создание сообщений
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Any, Dict

from selaski.api.responses import success_response
from selaski.core.database import get_db
from selaski.schemas.api_response import ApiResponse
from selaski.schemas.message import MessageResponse
from selaski.services.message_service import MessageService
from selaski.services.validation import validate_message_input

router = APIRouter(tags=["messages"])


def get_message_service(db: Session = Depends(get_db)) -> MessageService:
    return MessageService(db)


@router.post("", response_model=ApiResponse[MessageResponse], status_code=status.HTTP_201_CREATED)
def create_message(
    payload: Dict[str, Any] = Body(..., examples=[{"content": "Hola mundo", "userId": 1}]),
    service: MessageService = Depends(get_message_service),
):
    """Создает сообщение от имени существующего пользователя.

    Raises:
        ValidationError: 400 при пустом тексте или нецелом userId.
        NotFoundError: 404 если пользователь не найден.
    """
    message_in = validate_message_input(payload)
    message = service.create_message(content=message_in.content, user_id=message_in.user_id)
    return success_response(MessageResponse.model_validate(message), "Message created successfully")
