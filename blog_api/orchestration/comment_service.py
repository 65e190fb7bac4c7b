"""
Comment operations scoped to a parent post.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.models.comment import Comment
from blog_api.kernel.permissions.visibility import is_visible
from blog_api.kernel.query.composer import CommentFilters, QueryComposer, ResourceType
from blog_api.kernel.repository.resource_repository import ResourceRepository
from blog_api.kernel.results import (
    Err,
    Ok,
    Page,
    Result,
    internal,
    not_found,
    validation_failed,
)
from blog_api.orchestration.state_machine import WriteAction, WriteRequest, WriteState
from blog_api.logging_config import get_logger

logger = get_logger(__name__)


class CommentService:
    """
    Service for comment reads and writes.

    Comment mutations are gated on the comment's own owner; the parent
    post's owner has no special rights over comments.
    """

    def __init__(
        self,
        session: AsyncSession,
        repository: Optional[ResourceRepository] = None,
        composer: Optional[QueryComposer] = None,
    ):
        self.session = session
        self.repository = repository or ResourceRepository(session)
        self.composer = composer or QueryComposer(self.repository)

    async def _internal(self, message: str, request: Optional[WriteRequest] = None) -> Err:
        logger.exception(message)
        await self.session.rollback()
        error = internal(message)
        if request is not None and request.state is WriteState.AUTHORIZED_CHECK:
            return request.reject(error)
        return error

    async def list_comments(
        self,
        identity: Optional[CallerIdentity],
        post_id: int,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Result[Page[Comment]]:
        """List a post's comments, newest first, if the caller may read the post."""
        try:
            return await self.composer.list(
                ResourceType.COMMENT, identity, CommentFilters(post_id=post_id), page, page_size
            )
        except SQLAlchemyError:
            return await self._internal("Failed to retrieve comments")

    async def create_comment(
        self,
        identity: Optional[CallerIdentity],
        post_id: int,
        content: str,
    ) -> Result[Comment]:
        """Comment on a post the caller can read."""
        request = WriteRequest(WriteAction.CREATE, "comment", identity)
        error = request.authorize()
        if error:
            return error

        try:
            post = await self.repository.find_post(post_id)
        except SQLAlchemyError:
            return await self._internal("Failed to create comment", request)

        if post is None or not is_visible(post, identity):
            return request.reject(not_found("post"))

        if not content or not content.strip():
            return request.reject(validation_failed("The content field is required"))

        try:
            comment = await self.repository.create_comment(
                post_id=post.id,
                owner_id=identity.id,
                content=content,
            )
        except SQLAlchemyError:
            return await self._internal("Failed to create comment", request)

        request.resource_id = comment.id
        request.apply()
        return Ok(comment)

    async def update_comment(
        self,
        identity: Optional[CallerIdentity],
        comment_id: int,
        content: str,
    ) -> Result[Comment]:
        """Replace the content of an owned comment."""
        request = WriteRequest(WriteAction.UPDATE, "comment", identity, comment_id)
        try:
            comment = await self.repository.find_comment(comment_id)
        except SQLAlchemyError:
            return await self._internal("Failed to update comment")

        error = request.authorize(comment)
        if error:
            return error

        if not content or not content.strip():
            return request.reject(validation_failed("The content field is required"))

        try:
            comment = await self.repository.update_comment(comment, content=content)
        except SQLAlchemyError:
            return await self._internal("Failed to update comment", request)

        request.apply()
        return Ok(comment)

    async def delete_comment(
        self,
        identity: Optional[CallerIdentity],
        comment_id: int,
    ) -> Result[None]:
        """Delete an owned comment."""
        request = WriteRequest(WriteAction.DELETE, "comment", identity, comment_id)
        try:
            comment = await self.repository.find_comment(comment_id)
        except SQLAlchemyError:
            return await self._internal("Failed to delete comment")

        error = request.authorize(comment)
        if error:
            return error

        try:
            deleted = await self.repository.delete_comment(comment_id)
        except SQLAlchemyError:
            return await self._internal("Failed to delete comment", request)

        if not deleted:
            return request.reject(not_found("comment"))

        request.apply()
        return Ok(None)
