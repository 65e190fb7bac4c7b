"""
Post model.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from blog_api.kernel.models.user import User
    from blog_api.kernel.models.comment import Comment


class Post(Base, TimestampMixin):
    """A blog post. Readable by anyone once published, always by its owner."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Ownership (fixed at creation)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    published: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        index=True,
    )

    # Relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="posts",
    )
    # Comment removal is the cascade rule's job, not the ORM's
    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="post",
        passive_deletes=True,
        order_by="[Comment.created_at.desc(), Comment.id.desc()]",
    )

    __table_args__ = (
        Index("ix_posts_created_at", "created_at"),
        Index("ix_posts_published_created_at", "published", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Post {self.id} {self.title[:50]}>"
