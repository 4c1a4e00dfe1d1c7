# selaski/services/database_service.py
# Доступ к таблицам users и messages

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from selaski.models.message import Message
from selaski.models.user import User


# Коды нарушения уникальности у разных драйверов
PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"

# Наибольшее целое, которое хранят INTEGER в SQLite и BIGINT в PostgreSQL
MAX_DB_INT = 2**63 - 1


def _fits_id(value: int) -> bool:
    # id вне диапазона не может существовать в таблице
    return 1 <= value <= MAX_DB_INT


class UniqueConstraintViolation(Exception):
    """Вставка отклонена ограничением уникальности."""


def is_unique_violation(error: IntegrityError) -> bool:
    """Отличает нарушение уникальности от прочих ошибок целостности (FK, NOT NULL)."""
    orig = getattr(error, "orig", None)
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "sqlite_errorname", None) == SQLITE_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


def to_naive_utc(value: datetime) -> datetime:
    # created_at хранится как naive UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class DatabaseService:
    """Типизированные запросы к реляционному хранилищу.

    Args:
        db (Session): Сессия SQLAlchemy, одна на запрос.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> Optional[User]:
        if not _fits_id(user_id):
            return None
        return self.db.query(User).filter(User.id == user_id).first()

    def user_exists(self, user_id: int) -> bool:
        if not _fits_id(user_id):
            return False
        return self.db.query(User.id).filter(User.id == user_id).first() is not None

    def insert_user(self, name: str, email: str) -> User:
        """Вставка пользователя.

        Raises:
            UniqueConstraintViolation: Email уже занят.
            IntegrityError: Любое другое нарушение целостности.
        """
        user = User(name=name, email=email)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise UniqueConstraintViolation(str(e.orig)) from e
            raise
        self.db.refresh(user)
        return user

    def insert_message(self, content: str, user_id: int) -> Message:
        message = Message(
            content=content,
            user_id=user_id,
            created_at=datetime.utcnow()
        )
        self.db.add(message)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(message)
        return message

    def find_messages(
        self,
        user_id: int,
        content: Optional[str] = None,
        after: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[Message]:
        """Сообщения пользователя, новые первыми.

        content ищется как подстрока без учёта регистра, символы % и _
        экранируются. after включает границу (created_at >= after).
        """
        query = self.db.query(Message).filter(Message.user_id == user_id)

        if content:
            query = query.filter(Message.content.icontains(content, autoescape=True))
        if after is not None:
            query = query.filter(Message.created_at >= to_naive_utc(after))

        query = query.order_by(Message.created_at.desc(), Message.id.desc())
        if limit is not None:
            query = query.limit(min(limit, MAX_DB_INT))
        return query.all()
