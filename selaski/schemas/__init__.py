from .user import UserCreate, UserResponse
from .message import MessageCreate, MessageResponse, MessageFilters
from .api_response import ApiResponse

__all__ = [
    "UserCreate",
    "UserResponse",
    "MessageCreate",
    "MessageResponse",
    "MessageFilters",
    "ApiResponse",
]
