# Бизнес-логика сообщений
import logging

from sqlalchemy.orm import Session

from selaski.core.exceptions import NotFoundError
from selaski.models.message import Message
from selaski.services.database_service import DatabaseService

logger = logging.getLogger(__name__)


class MessageService:
    def __init__(self, db: Session):
        self.repository = DatabaseService(db)

    def create_message(self, content: str, user_id: int) -> Message:
        """Создаёт сообщение от имени существующего пользователя.

        Raises:
            NotFoundError: Пользователь user_id не найден.
        """
        if not self.repository.user_exists(user_id):
            logger.warning(f"Сообщение для несуществующего пользователя {user_id}")
            raise NotFoundError("User not found")

        message = self.repository.insert_message(content=content, user_id=user_id)
        logger.info(f"Создано сообщение id={message.id} пользователя {user_id}")
        return message
