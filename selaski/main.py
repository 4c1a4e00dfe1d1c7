import sys
import os
import logging
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

# Добавляем корневую директорию в PYTHONPATH для прямого запуска
if __name__ == "__main__":
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from selaski.config import settings

# Настройка логирования
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)
from selaski.core.database import init_db
from selaski.core.exceptions import AppError
from selaski.api.responses import app_exception_handler, success_response
from selaski.api.endpoints import users, messages

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Selaski API",
    description="API REST для управления пользователями и сообщениями",
    version="1.0.0",
    docs_url="/api",
)

# Единый обработчик ошибок: конверт {success: false, message, data: null}
app.add_exception_handler(AppError, app_exception_handler)
app.add_exception_handler(RequestValidationError, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, app_exception_handler)
app.add_exception_handler(Exception, app_exception_handler)

# Роуты
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(messages.router, prefix="/messages", tags=["Messages"])


# --- Базовый эндпоинт
@app.get("/")
async def root():
    return success_response(None, "Selaski API is running")


# --- Функции инициализации -----------------------------------------------

def log_routes(application: FastAPI):
    """Выводит в лог зарегистрированные маршруты (метод и путь)"""
    logger.info("🚦 Зарегистрированные маршруты:")
    for route in application.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods))
            logger.info(f"  {methods:<10} {route.path}")


def _init_services():
    """Создание таблиц БД и вывод маршрутов"""
    try:
        init_db()
        logger.info("✅ База данных инициализирована")
    except Exception as e:
        logger.error(f"❌ Ошибка инициализации базы данных: {e}")
        raise
    log_routes(app)


# --- События FastAPI -------------------------------------------------------

@app.on_event("startup")
async def on_startup():
    """Запускается автоматически при старте FastAPI (uvicorn)"""
    _init_services()


# --- Возможность запуска как скрипта --------------------------------------

def run():
    logger.info(f"🚀 Сервер запускается на http://{settings.HOST}:{settings.PORT}/")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
