"""
Post endpoints, including the nested comment collection of a post.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from blog_api.api.deps import DbSession, OptionalIdentity, unwrap
from blog_api.orchestration.comment_service import CommentService
from blog_api.orchestration.post_service import PostService
from blog_api.schemas.comment import CommentCreate, CommentResponse
from blog_api.schemas.common import PaginatedResponse, SuccessResponse
from blog_api.schemas.post import PostCreate, PostDetailResponse, PostResponse, PostUpdate

router = APIRouter()


@router.get("", response_model=PaginatedResponse[PostResponse])
async def list_posts(
    identity: OptionalIdentity,
    db: DbSession,
    page: int = Query(1, description="1-based page number"),
    per_page: Optional[int] = Query(None, description="Page size; defaults to 15, capped at 100"),
    published: Optional[bool] = Query(None, description="Filter by publication state"),
    owner_id: Optional[int] = Query(None, description="Filter by author"),
):
    """
    List posts newest first.

    Anonymous callers see published posts only; authenticated callers also
    see their own drafts. Filters narrow that set and never widen it.
    """
    result = await PostService(db).list_posts(
        identity,
        published=published,
        owner_id=owner_id,
        page=page,
        page_size=per_page,
    )
    listing = unwrap(result)
    return PaginatedResponse.from_page(
        listing, [PostResponse.model_validate(p) for p in listing.items]
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(data: PostCreate, identity: OptionalIdentity, db: DbSession):
    """Create a post owned by the caller."""
    result = await PostService(db).create_post(
        identity,
        title=data.title,
        content=data.content,
        published=data.published,
    )
    return PostResponse.model_validate(unwrap(result))


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: int, identity: OptionalIdentity, db: DbSession):
    """Get a post with its comments."""
    result = await PostService(db).get_post(identity, post_id, with_comments=True)
    return PostDetailResponse.model_validate(unwrap(result))


@router.api_route("/{post_id}", methods=["PUT", "PATCH"], response_model=PostResponse)
async def update_post(post_id: int, data: PostUpdate, identity: OptionalIdentity, db: DbSession):
    """Update title, content or publication state of an owned post."""
    result = await PostService(db).update_post(
        identity,
        post_id,
        data.model_dump(exclude_unset=True),
    )
    return PostResponse.model_validate(unwrap(result))


@router.delete("/{post_id}", response_model=SuccessResponse)
async def delete_post(post_id: int, identity: OptionalIdentity, db: DbSession):
    """Delete an owned post and all of its comments."""
    unwrap(await PostService(db).delete_post(identity, post_id))
    return SuccessResponse(message="Post deleted successfully")


@router.get("/{post_id}/comments", response_model=PaginatedResponse[CommentResponse])
async def list_comments(
    post_id: int,
    identity: OptionalIdentity,
    db: DbSession,
    page: int = Query(1, description="1-based page number"),
    per_page: Optional[int] = Query(None, description="Page size; defaults to 15, capped at 100"),
):
    """List comments of a post the caller can read, newest first."""
    result = await CommentService(db).list_comments(identity, post_id, page=page, page_size=per_page)
    listing = unwrap(result)
    return PaginatedResponse.from_page(
        listing, [CommentResponse.model_validate(c) for c in listing.items]
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    data: CommentCreate,
    identity: OptionalIdentity,
    db: DbSession,
):
    """Comment on a post."""
    result = await CommentService(db).create_comment(identity, post_id, data.content)
    return CommentResponse.model_validate(unwrap(result))
