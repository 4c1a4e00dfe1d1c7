# Модель пользователя
from sqlalchemy import Column, Integer, String
from selaski.core.database import Base

class User(Base):
    """Пользователь сервиса.

    Создаётся через POST /users и больше не изменяется. Сообщения ссылаются
    на пользователя по user_id, обратной коллекции у пользователя нет.

    Attributes:
        id (int): Уникальный идентификатор записи в базе данных.
        name (str): Имя пользователя (непустое).
        email (str): Email пользователя, уникален в пределах таблицы.

    Examples:
        >>> user = User(name="Juan Pérez", email="juan@example.com")
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)  # уникальность проверяет сама БД
