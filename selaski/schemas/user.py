# Pydantic-схемы для User
from pydantic import BaseModel, EmailStr, Field, field_validator

class UserBase(BaseModel):
    name: str = Field(..., examples=["Juan Pérez"])
    email: EmailStr = Field(..., examples=["juan@example.com"])

class UserCreate(UserBase):
    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name should not be empty")
        return value

class UserResponse(UserBase):
    id: int

    class Config:
        from_attributes = True
