# Базовая модель SQLAlchemy
from selaski.core.database import Base
from selaski.models.user import User
from selaski.models.message import Message

# Этот файл нужен, чтобы при запуске Base.metadata.create_all()
# все модели были зарегистрированы и таблицы были созданы.

__all__ = ["Base", "User", "Message"]
