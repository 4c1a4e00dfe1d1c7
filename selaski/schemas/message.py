# Pydantic-схемы для Message
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional
import re

# Строка из одних цифр pydantic принял бы как Unix-время, а это не ISO-8601
_NUMERIC_RE = re.compile(r"^\s*[+-]?\d+(\.\d+)?\s*$")

class MessageBase(BaseModel):
    # В JSON поля в camelCase (userId, createdAt), в Python - snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str = Field(..., examples=["Hola mundo"])
    user_id: StrictInt = Field(..., examples=[1])

class MessageCreate(MessageBase):
    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content should not be empty")
        return value

class MessageResponse(MessageBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    created_at: datetime

class MessageFilters(BaseModel):
    """Фильтры для GET /users/{id}/messages (все необязательные)"""
    content: Optional[str] = Field(default=None, description="Подстрока в тексте сообщения")
    after: Optional[datetime] = Field(default=None, description="Только сообщения с createdAt >= after (ISO-8601)")
    limit: Optional[int] = Field(default=None, ge=1, description="Максимальное количество сообщений")

    @field_validator("after", mode="before")
    @classmethod
    def after_is_iso8601(cls, value):
        if isinstance(value, (int, float)) or (isinstance(value, str) and _NUMERIC_RE.match(value)):
            raise ValueError("after must be an ISO-8601 date string")
        return value
