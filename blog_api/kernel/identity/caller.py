"""
Caller identity passed explicitly through every policy and service call.
"""

from dataclasses import dataclass

from blog_api.kernel.models.user import User


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller. ``None`` in its place means anonymous."""

    id: int
    name: str = ""
    email: str = ""

    @classmethod
    def from_user(cls, user: User) -> "CallerIdentity":
        return cls(id=user.id, name=user.name, email=user.email)
