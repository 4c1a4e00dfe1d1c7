import os
import sys
from pathlib import Path

import pytest

# Добавляем корень проекта в PYTHONPATH
sys.path.insert(0, str(Path(__file__).parent.parent))

# База в памяти до импорта приложения: движок создаётся при импорте
os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient

from selaski.core.database import Base, SessionLocal, engine
from selaski.main import app
from selaski.models import base  # noqa: F401  регистрирует модели


@pytest.fixture()
def db():
    """Чистая схема и сессия на каждый тест."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    """A test client for the FastAPI app."""
    return TestClient(app)
