"""
Comment model.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from blog_api.kernel.models.user import User
    from blog_api.kernel.models.post import Post


class Comment(Base, TimestampMixin):
    """A comment on a post. Mutable only by its own owner."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Relationships
    post: Mapped["Post"] = relationship(
        "Post",
        back_populates="comments",
    )
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="comments",
    )

    __table_args__ = (
        Index("ix_comments_created_at", "created_at"),
        Index("ix_comments_post_created_at", "post_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Comment {self.id} post={self.post_id}>"
