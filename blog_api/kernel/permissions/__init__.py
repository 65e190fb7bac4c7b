"""
Permission Core - visibility and ownership policies.
"""

from blog_api.kernel.permissions.visibility import (
    is_visible,
    is_post_visible,
    visible_posts_clause,
    visible_comments_clause,
)
from blog_api.kernel.permissions.ownership import can_mutate, can_delete

__all__ = [
    "is_visible",
    "is_post_visible",
    "visible_posts_clause",
    "visible_comments_clause",
    "can_mutate",
    "can_delete",
]
