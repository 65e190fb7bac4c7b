"""
Visibility policy: which records a caller may read.

A post is readable when it is published or when the caller owns it. Comments
carry no publication gate of their own; their listings are gated on the
parent post instead.
"""

from typing import Optional, Protocol, Union

from sqlalchemy import ColumnElement, or_, true

from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.models.comment import Comment
from blog_api.kernel.models.post import Post


class Publishable(Protocol):
    """Anything with an owner and a publication flag."""

    owner_id: int
    published: bool


def is_post_visible(post: Publishable, identity: Optional[CallerIdentity]) -> bool:
    """Return True if the post is published or owned by the caller."""
    if post.published:
        return True
    return identity is not None and identity.id == post.owner_id


def is_visible(resource: Union[Post, Comment], identity: Optional[CallerIdentity]) -> bool:
    """
    Decide whether ``resource`` is readable by ``identity``.

    Pure function of the resource snapshot and the identity; never touches
    the database.
    """
    if isinstance(resource, Comment):
        return True
    return is_post_visible(resource, identity)


def visible_posts_clause(identity: Optional[CallerIdentity]) -> ColumnElement[bool]:
    """SQL rendition of ``is_post_visible`` for use as a listing base predicate."""
    if identity is None:
        return Post.published.is_(True)
    return or_(Post.published.is_(True), Post.owner_id == identity.id)


def visible_comments_clause(identity: Optional[CallerIdentity]) -> ColumnElement[bool]:
    """Comments are never filtered on their own; the parent post gates them."""
    return true()
