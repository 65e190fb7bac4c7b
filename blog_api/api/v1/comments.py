"""
Comment endpoints addressed by comment id.
"""

from fastapi import APIRouter

from blog_api.api.deps import DbSession, OptionalIdentity, unwrap
from blog_api.orchestration.comment_service import CommentService
from blog_api.schemas.comment import CommentResponse, CommentUpdate
from blog_api.schemas.common import SuccessResponse

router = APIRouter()


@router.api_route("/{comment_id}", methods=["PUT", "PATCH"], response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    data: CommentUpdate,
    identity: OptionalIdentity,
    db: DbSession,
):
    """Update an owned comment."""
    result = await CommentService(db).update_comment(identity, comment_id, data.content)
    return CommentResponse.model_validate(unwrap(result))


@router.delete("/{comment_id}", response_model=SuccessResponse)
async def delete_comment(comment_id: int, identity: OptionalIdentity, db: DbSession):
    """Delete an owned comment."""
    unwrap(await CommentService(db).delete_comment(identity, comment_id))
    return SuccessResponse(message="Comment deleted successfully")
