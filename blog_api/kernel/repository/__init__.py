"""
Resource Repository - persistence for posts and comments.
"""

from blog_api.kernel.repository.resource_repository import (
    ResourceRepository,
    POST_FIELDS,
    COMMENT_FIELDS,
)

__all__ = [
    "ResourceRepository",
    "POST_FIELDS",
    "COMMENT_FIELDS",
]
