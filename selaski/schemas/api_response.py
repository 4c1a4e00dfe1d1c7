# Единый конверт ответа {success, message, data}
from pydantic import BaseModel, Field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    success: bool = Field(..., examples=[True])
    message: str = Field(..., examples=["Operation completed successfully"])
    data: Optional[T] = None
