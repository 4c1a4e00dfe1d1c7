# Настройки сервиса (порт, база данных, логирование)
# selaski/config.py

from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    # Все переменные опциональные, значения по умолчанию подходят для локального запуска
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000, ge=1, le=65535)
    DATABASE_URL: str = Field(default="sqlite:///./data/selaski.sqlite")
    LOG_LEVEL: str = Field(default="INFO")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Игнорировать лишние переменные в .env

settings = Settings()
