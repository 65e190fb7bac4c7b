"""
SQLAlchemy-backed store for posts and comments.

The repository knows nothing about callers: visibility predicates and
ordering arrive from the query composer, authorization happens in the
services before any mutation is requested.
"""

from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blog_api.kernel.cascade import on_post_deleted
from blog_api.kernel.models.base import utcnow
from blog_api.kernel.models.comment import Comment
from blog_api.kernel.models.post import Post

Order = Sequence[Any]

POST_FIELDS = frozenset(("title", "content", "published"))
COMMENT_FIELDS = frozenset(("content",))


class ResourceRepository:
    """
    Narrow persistence interface consumed by the kernel.

    Usage:
        repo = ResourceRepository(session)
        post = await repo.find_post(post_id)
        items, total = await repo.list_posts(predicate, order, page=1, page_size=15)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # Lookups

    async def find_post(self, post_id: int, with_comments: bool = False) -> Optional[Post]:
        """Fetch a post with its owner loaded, or None."""
        options = [selectinload(Post.owner)]
        if with_comments:
            options.append(selectinload(Post.comments).selectinload(Comment.owner))
        query = (
            select(Post)
            .options(*options)
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_comment(self, comment_id: int) -> Optional[Comment]:
        """Fetch a comment with its owner loaded, or None."""
        query = (
            select(Comment)
            .options(selectinload(Comment.owner))
            .where(Comment.id == comment_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    # Listings

    async def list_posts(
        self,
        predicate: ColumnElement[bool],
        order: Order,
        page: int,
        page_size: int,
    ) -> Tuple[List[Post], int]:
        """Return one page of posts matching ``predicate`` and the total match count."""
        count_query = select(func.count()).select_from(Post).where(predicate)
        total = (await self.session.execute(count_query)).scalar_one()
        offset = (page - 1) * page_size
        if offset >= total:
            # Past the last page; no OFFSET scan
            return [], total

        query = (
            select(Post)
            .options(selectinload(Post.owner))
            .where(predicate)
            .order_by(*order)
            .limit(page_size)
            .offset(offset)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def list_comments(
        self,
        post_id: int,
        order: Order,
        page: int,
        page_size: int,
        predicate: Optional[ColumnElement[bool]] = None,
    ) -> Tuple[List[Comment], int]:
        """Return one page of a post's comments and the total comment count."""
        conditions = [Comment.post_id == post_id]
        if predicate is not None:
            conditions.append(predicate)

        count_query = select(func.count()).select_from(Comment).where(*conditions)
        total = (await self.session.execute(count_query)).scalar_one()
        offset = (page - 1) * page_size
        if offset >= total:
            return [], total

        query = (
            select(Comment)
            .options(selectinload(Comment.owner))
            .where(*conditions)
            .order_by(*order)
            .limit(page_size)
            .offset(offset)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    # Writes

    async def create_post(
        self,
        *,
        owner_id: int,
        title: str,
        content: str,
        published: bool = False,
    ) -> Post:
        post = Post(
            owner_id=owner_id,
            title=title,
            content=content,
            published=published,
        )
        self.session.add(post)
        await self.session.flush()
        return await self.find_post(post.id)

    async def create_comment(
        self,
        *,
        post_id: int,
        owner_id: int,
        content: str,
    ) -> Comment:
        comment = Comment(
            post_id=post_id,
            owner_id=owner_id,
            content=content,
        )
        self.session.add(comment)
        await self.session.flush()
        return await self.find_comment(comment.id)

    async def update_post(self, post: Post, **fields: Any) -> Post:
        """Apply title/content/published changes; other keys are ignored."""
        for name, value in fields.items():
            if name in POST_FIELDS:
                setattr(post, name, value)
        post.updated_at = utcnow()
        await self.session.flush()
        return await self.find_post(post.id)

    async def update_comment(self, comment: Comment, **fields: Any) -> Comment:
        """Apply content changes; other keys are ignored."""
        for name, value in fields.items():
            if name in COMMENT_FIELDS:
                setattr(comment, name, value)
        comment.updated_at = utcnow()
        await self.session.flush()
        return await self.find_comment(comment.id)

    async def delete_post(self, post_id: int) -> bool:
        """
        Delete a post and, in the same transaction, its comments.

        Comments are removed before the post row.

        Returns:
            False if no post row was removed
        """
        await on_post_deleted(self.session, post_id)
        result = await self.session.execute(
            delete(Post)
            .where(Post.id == post_id)
            .execution_options(synchronize_session="evaluate")
        )
        return bool(result.rowcount)

    async def delete_comment(self, comment_id: int) -> bool:
        result = await self.session.execute(
            delete(Comment)
            .where(Comment.id == comment_id)
            .execution_options(synchronize_session="evaluate")
        )
        return bool(result.rowcount)
