"""
Kernel Data Models

SQLAlchemy models for users, posts and comments.
"""

from blog_api.kernel.models.base import Base, TimestampMixin, UTCDateTime, utcnow
from blog_api.kernel.models.user import User
from blog_api.kernel.models.post import Post
from blog_api.kernel.models.comment import Comment

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "UTCDateTime",
    "utcnow",
    # Identity
    "User",
    # Content
    "Post",
    "Comment",
]
