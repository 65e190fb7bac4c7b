"""
Query Composer - filtered, ordered, paginated listings.
"""

from blog_api.kernel.query.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
    clamp_page_size,
    normalize_page,
)
from blog_api.kernel.query.composer import (
    QueryComposer,
    ResourceType,
    PostFilters,
    CommentFilters,
    POST_ORDER,
    COMMENT_ORDER,
    post_predicate,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PageRequest",
    "clamp_page_size",
    "normalize_page",
    "QueryComposer",
    "ResourceType",
    "PostFilters",
    "CommentFilters",
    "POST_ORDER",
    "COMMENT_ORDER",
    "post_predicate",
]
