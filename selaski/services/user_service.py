# Бизнес-логика пользователей
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from selaski.core.exceptions import ConflictError, NotFoundError
from selaski.models.message import Message
from selaski.models.user import User
from selaski.schemas.message import MessageFilters
from selaski.services.database_service import DatabaseService, UniqueConstraintViolation

logger = logging.getLogger(__name__)


class UserService:
    """Создание пользователей и выборка их сообщений.

    Входные данные уже проверены функциями из selaski.services.validation,
    сервис отвечает только за правила предметной области.

    Args:
        db (Session): Сессия базы данных.

    Examples:
        >>> service = UserService(db)
        >>> user = service.create_user("Juan", "juan@example.com")
        >>> service.list_messages_for_user(user.id, MessageFilters(limit=2))
        []
    """

    def __init__(self, db: Session):
        self.repository = DatabaseService(db)

    def create_user(self, name: str, email: str) -> User:
        """Создаёт пользователя.

        Raises:
            ConflictError: Пользователь с таким email уже существует.
        """
        try:
            user = self.repository.insert_user(name=name, email=email)
        except UniqueConstraintViolation:
            logger.warning(f"Email уже занят: {email}")
            raise ConflictError("Email already exists")
        logger.info(f"Создан пользователь id={user.id}")
        return user

    def list_messages_for_user(
        self, user_id: int, filters: Optional[MessageFilters] = None
    ) -> List[Message]:
        """Сообщения пользователя с фильтрами content/after/limit, новые первыми.

        Raises:
            NotFoundError: Пользователь не найден.
        """
        if not self.repository.user_exists(user_id):
            raise NotFoundError("User not found")

        filters = filters or MessageFilters()
        return self.repository.find_messages(
            user_id,
            content=filters.content,
            after=filters.after,
            limit=filters.limit,
        )
