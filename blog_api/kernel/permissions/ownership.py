"""
Ownership policy: which records a caller may mutate or delete.
"""

from typing import Optional, Protocol

from blog_api.kernel.identity.caller import CallerIdentity


class Owned(Protocol):
    """Anything that records the user id of its creator."""

    owner_id: int


def can_mutate(resource: Owned, identity: Optional[CallerIdentity]) -> bool:
    """
    Return True only when the caller is authenticated and owns ``resource``.

    Each resource is checked against its own owner; a comment's parent post
    plays no part.
    """
    return identity is not None and identity.id == resource.owner_id


def can_delete(resource: Owned, identity: Optional[CallerIdentity]) -> bool:
    """Deletion uses the same rule as mutation."""
    return can_mutate(resource, identity)
