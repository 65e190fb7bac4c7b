"""
Post schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from blog_api.schemas.auth import UserPublic
from blog_api.schemas.comment import CommentResponse


class PostCreate(BaseModel):
    """Post creation request. The owner always comes from the caller."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str
    published: bool = False


class PostUpdate(BaseModel):
    """Post update request. Only provided fields are changed."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    published: Optional[bool] = None


class PostResponse(BaseModel):
    """Post response with its owner's public identity."""

    id: int
    title: str
    content: str
    published: bool
    owner_id: int
    owner: UserPublic
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PostDetailResponse(PostResponse):
    """Single post including its comments, newest first."""

    comments: List[CommentResponse] = []
