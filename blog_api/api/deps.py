"""
FastAPI dependencies for authentication, database sessions and result handling.
"""

from typing import Annotated, Dict, Optional, TypeVar

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db
from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.identity.identity_service import IdentityService
from blog_api.kernel.identity.jwt import verify_access_token
from blog_api.kernel.results import Err, ErrorKind, Result
from blog_api.logging_config import bind_caller

T = TypeVar("T")

# Security scheme
security = HTTPBearer(auto_error=False)

DbSession = Annotated[AsyncSession, Depends(get_db)]

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ResultError(HTTPException):
    """HTTP error raised from a tagged service failure; keeps the error code."""

    def __init__(self, error: Err):
        headers = None
        if error.kind is ErrorKind.UNAUTHENTICATED:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(
            status_code=STATUS_BY_KIND[error.kind],
            detail=error.message,
            headers=headers,
        )
        self.code = error.kind.value


def unwrap(result: Result[T]) -> T:
    """Return the success value or raise the matching HTTP error."""
    if isinstance(result, Err):
        raise ResultError(result)
    return result.value


async def get_current_identity_optional(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    db: DbSession,
) -> Optional[CallerIdentity]:
    """
    Resolve the caller identity if a valid bearer token is present.

    Missing, invalid or expired tokens resolve to anonymous; write
    operations then fail with 401 from the write path.
    """
    if not credentials:
        return None

    payload = verify_access_token(credentials.credentials)
    if not payload:
        return None

    identity_service = IdentityService(db)
    user = await identity_service.get_user_by_id(int(payload.sub))
    if not user:
        return None

    bind_caller(user.id)
    return CallerIdentity.from_user(user)


async def get_current_identity(
    identity: Annotated[Optional[CallerIdentity], Depends(get_current_identity_optional)],
) -> CallerIdentity:
    """Get the authenticated caller or raise 401."""
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


CurrentIdentity = Annotated[CallerIdentity, Depends(get_current_identity)]
OptionalIdentity = Annotated[Optional[CallerIdentity], Depends(get_current_identity_optional)]
