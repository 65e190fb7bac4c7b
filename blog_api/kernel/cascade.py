"""
Cascade rule: a deleted post takes its comments with it.

Runs on the caller's session so the comment removal commits or rolls back
together with the post deletion. Readers on other connections never see a
post gone while its comments remain, or the reverse.
"""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.kernel.models.comment import Comment
from blog_api.logging_config import get_logger

logger = get_logger(__name__)


async def on_post_deleted(session: AsyncSession, post_id: int) -> int:
    """
    Remove every comment that references ``post_id``.

    Must run inside the transaction that deletes the post, before the post
    row itself is removed.

    Returns:
        Number of comments removed
    """
    result = await session.execute(
        delete(Comment)
        .where(Comment.post_id == post_id)
        .execution_options(synchronize_session="evaluate")
    )
    removed = result.rowcount or 0
    logger.debug("Cascade removed comments", extra={"post_id": post_id, "removed": removed})
    return removed
