"""
Query composer for post and comment listings.

Every listing starts from the visibility predicate for the caller and adds
caller-supplied filters as a conjunction, so a broad filter (for example
``published=False``) can narrow the result but never widen it past what the
caller may read. Ordering is newest-first with a descending-id tie-break,
which keeps pages stable when creation timestamps collide.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from sqlalchemy import ColumnElement, and_

from blog_api.config import get_settings
from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.models.comment import Comment
from blog_api.kernel.models.post import Post
from blog_api.kernel.permissions.visibility import (
    is_visible,
    visible_comments_clause,
    visible_posts_clause,
)
from blog_api.kernel.query.pagination import PageRequest, normalize_page
from blog_api.kernel.repository.resource_repository import ResourceRepository
from blog_api.kernel.results import Ok, Page, Result, not_found, validation_failed


class ResourceType(str, Enum):
    """Listable resource collections."""
    POST = "post"
    COMMENT = "comment"


@dataclass(frozen=True)
class PostFilters:
    """Optional exact-match filters for post listings."""

    published: Optional[bool] = None
    owner_id: Optional[int] = None


@dataclass(frozen=True)
class CommentFilters:
    """Comment listings are always scoped to a single post."""

    post_id: int


POST_ORDER = (Post.created_at.desc(), Post.id.desc())
COMMENT_ORDER = (Comment.created_at.desc(), Comment.id.desc())


def post_predicate(
    identity: Optional[CallerIdentity],
    filters: Optional[PostFilters] = None,
) -> ColumnElement[bool]:
    """Visibility base predicate AND any caller filters."""
    conditions: List[ColumnElement[bool]] = [visible_posts_clause(identity)]
    if filters is not None:
        if filters.published is not None:
            conditions.append(Post.published.is_(filters.published))
        if filters.owner_id is not None:
            conditions.append(Post.owner_id == filters.owner_id)
    return and_(*conditions)


class QueryComposer:
    """
    Builds filtered, ordered, paginated views over posts and comments.

    Usage:
        composer = QueryComposer(ResourceRepository(session))
        result = await composer.list(ResourceType.POST, identity, PostFilters(published=True), page=2)
        if result.ok:
            page = result.value
    """

    def __init__(
        self,
        repository: ResourceRepository,
        default_page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
    ):
        settings = get_settings()
        self.repository = repository
        self.default_page_size = default_page_size or settings.default_page_size
        self.max_page_size = max_page_size or settings.max_page_size

    def page_request(self, page: Optional[int], page_size: Optional[int]) -> PageRequest:
        return normalize_page(page, page_size, self.default_page_size, self.max_page_size)

    async def list(
        self,
        resource_type: ResourceType,
        identity: Optional[CallerIdentity],
        filters: Union[PostFilters, CommentFilters, None] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Result[Page]:
        """Dispatch a listing by resource type."""
        if resource_type is ResourceType.POST:
            if filters is not None and not isinstance(filters, PostFilters):
                return validation_failed("Unsupported filters for post listing")
            return await self.list_posts(identity, filters, page, page_size)

        if not isinstance(filters, CommentFilters):
            return validation_failed("Comment listings require a post_id")
        return await self.list_comments(identity, filters.post_id, page, page_size)

    async def list_posts(
        self,
        identity: Optional[CallerIdentity],
        filters: Optional[PostFilters] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Result[Page[Post]]:
        request = self.page_request(page, page_size)
        items, total = await self.repository.list_posts(
            post_predicate(identity, filters),
            POST_ORDER,
            request.page,
            request.page_size,
        )
        return Ok(Page(items=items, total=total, page=request.page, page_size=request.page_size))

    async def list_comments(
        self,
        identity: Optional[CallerIdentity],
        post_id: int,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Result[Page[Comment]]:
        """List a post's comments; an invisible or missing post is reported as not found."""
        post = await self.repository.find_post(post_id)
        if post is None or not is_visible(post, identity):
            return not_found("post")

        request = self.page_request(page, page_size)
        items, total = await self.repository.list_comments(
            post_id,
            COMMENT_ORDER,
            request.page,
            request.page_size,
            predicate=visible_comments_clause(identity),
        )
        return Ok(Page(items=items, total=total, page=request.page, page_size=request.page_size))
