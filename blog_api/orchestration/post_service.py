"""
Post operations: listing, lookup and the owner-gated write path.
"""

from typing import Any, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.models.post import Post
from blog_api.kernel.permissions.visibility import is_visible
from blog_api.kernel.query.composer import PostFilters, QueryComposer, ResourceType
from blog_api.kernel.repository.resource_repository import POST_FIELDS, ResourceRepository
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


class PostService:
    """
    Service for post reads and writes.

    All methods take the caller identity explicitly (``None`` for anonymous)
    and return tagged results instead of raising.
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

    async def list_posts(
        self,
        identity: Optional[CallerIdentity],
        published: Optional[bool] = None,
        owner_id: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Result[Page[Post]]:
        """List posts visible to the caller, newest first."""
        filters = PostFilters(published=published, owner_id=owner_id)
        try:
            return await self.composer.list(ResourceType.POST, identity, filters, page, page_size)
        except SQLAlchemyError:
            return await self._internal("Failed to retrieve posts")

    async def get_post(
        self,
        identity: Optional[CallerIdentity],
        post_id: int,
        with_comments: bool = True,
    ) -> Result[Post]:
        """
        Fetch a single post.

        A post the caller may not read is reported exactly like a missing one.
        """
        try:
            post = await self.repository.find_post(post_id, with_comments=with_comments)
        except SQLAlchemyError:
            return await self._internal("Failed to retrieve post")

        if post is None or not is_visible(post, identity):
            return not_found("post")
        return Ok(post)

    async def create_post(
        self,
        identity: Optional[CallerIdentity],
        title: str,
        content: str,
        published: bool = False,
    ) -> Result[Post]:
        """Create a post owned by the caller."""
        request = WriteRequest(WriteAction.CREATE, "post", identity)
        error = request.authorize()
        if error:
            return error

        if not title or not title.strip():
            return request.reject(validation_failed("The title field is required"))

        try:
            post = await self.repository.create_post(
                owner_id=identity.id,
                title=title,
                content=content,
                published=published,
            )
        except SQLAlchemyError:
            return await self._internal("Failed to create post", request)

        request.resource_id = post.id
        request.apply()
        return Ok(post)

    async def update_post(
        self,
        identity: Optional[CallerIdentity],
        post_id: int,
        changes: Mapping[str, Any],
    ) -> Result[Post]:
        """
        Update title, content or published flag of an owned post.

        Unknown keys (including any attempt to change the owner) are dropped.
        """
        request = WriteRequest(WriteAction.UPDATE, "post", identity, post_id)
        try:
            post = await self.repository.find_post(post_id)
        except SQLAlchemyError:
            return await self._internal("Failed to update post")

        error = request.authorize(post)
        if error:
            return error

        fields = {
            name: value
            for name, value in changes.items()
            if name in POST_FIELDS and value is not None
        }
        if "title" in fields and not str(fields["title"]).strip():
            return request.reject(validation_failed("The title field must not be empty"))

        try:
            post = await self.repository.update_post(post, **fields)
        except SQLAlchemyError:
            return await self._internal("Failed to update post", request)

        request.apply()
        return Ok(post)

    async def delete_post(
        self,
        identity: Optional[CallerIdentity],
        post_id: int,
    ) -> Result[None]:
        """Delete an owned post together with all of its comments."""
        request = WriteRequest(WriteAction.DELETE, "post", identity, post_id)
        try:
            post = await self.repository.find_post(post_id)
        except SQLAlchemyError:
            return await self._internal("Failed to delete post")

        error = request.authorize(post)
        if error:
            return error

        try:
            deleted = await self.repository.delete_post(post_id)
        except SQLAlchemyError:
            return await self._internal("Failed to delete post", request)

        if not deleted:
            # Removed by a concurrent request between fetch and delete
            return request.reject(not_found("post"))

        request.apply()
        return Ok(None)
