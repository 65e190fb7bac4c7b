"""
Comment schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from blog_api.schemas.auth import UserPublic


class CommentCreate(BaseModel):
    """Comment creation request. The post comes from the URL path."""

    content: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    """Comment update request."""

    content: str = Field(..., min_length=1)


class CommentResponse(BaseModel):
    """Comment response with its owner's public identity."""

    id: int
    post_id: int
    owner_id: int
    owner: UserPublic
    content: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
