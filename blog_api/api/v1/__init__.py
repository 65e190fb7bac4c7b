"""
API v1 routes.
"""

from fastapi import APIRouter

from blog_api.api.v1 import auth, posts, comments
from blog_api.schemas.common import ErrorResponse

# Error bodies produced by the write path and visibility checks
CONTENT_ERRORS = {
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    403: {"model": ErrorResponse, "description": "Caller does not own the resource"},
    404: {"model": ErrorResponse, "description": "Resource missing or not visible"},
}

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(posts.router, prefix="/posts", tags=["Posts"], responses=CONTENT_ERRORS)
router.include_router(comments.router, prefix="/comments", tags=["Comments"], responses=CONTENT_ERRORS)
