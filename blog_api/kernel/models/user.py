"""
User model for identity management.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from blog_api.kernel.models.post import Post
    from blog_api.kernel.models.comment import Comment


class User(Base, TimestampMixin):
    """User account model."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Relationships
    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="owner",
        passive_deletes=True,
    )
    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="owner",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"
