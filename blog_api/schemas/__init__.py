"""
Pydantic schemas for API request/response validation.
"""

from blog_api.schemas.common import (
    ErrorResponse,
    SuccessResponse,
    PaginatedResponse,
    HealthResponse,
)
from blog_api.schemas.auth import (
    UserCreate,
    UserLogin,
    UserPublic,
    UserResponse,
    TokenResponse,
)
from blog_api.schemas.comment import (
    CommentCreate,
    CommentUpdate,
    CommentResponse,
)
from blog_api.schemas.post import (
    PostCreate,
    PostUpdate,
    PostResponse,
    PostDetailResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "SuccessResponse",
    "PaginatedResponse",
    "HealthResponse",
    # Auth
    "UserCreate",
    "UserLogin",
    "UserPublic",
    "UserResponse",
    "TokenResponse",
    # Comments
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    # Posts
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostDetailResponse",
]
