# Подключение к базе данных через SQLAlchemy

from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Берём строку подключения из глобальных настроек приложения
from selaski.config import settings


def _engine_kwargs(db_url: str) -> dict:
    """Параметры движка в зависимости от СУБД.

    Для SQLite отключаем проверку потока (FastAPI обслуживает запросы
    в пуле потоков), для базы в памяти держим одно общее соединение,
    иначе каждое новое соединение видело бы пустую базу.
    """
    if not db_url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


# Если нужно, создаём директорию для файла базы данных
db_url = settings.DATABASE_URL
if db_url.startswith("sqlite") and "///" in db_url:
    sqlite_path = db_url.split("///")[-1]
    if sqlite_path and sqlite_path != ":memory:":
        Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(db_url, **_engine_kwargs(db_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite по умолчанию не проверяет внешние ключи
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db():
    """Создание таблиц, если их ещё нет."""
    # Импорт регистрирует модели в метаданных
    from selaski.models import base  # noqa: F401
    Base.metadata.create_all(bind=engine)


# Функция для получения сессии БД
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
