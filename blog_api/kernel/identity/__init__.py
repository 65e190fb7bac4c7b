"""
Identity Core - caller identity, authentication and user management.
"""

from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.identity.password import PasswordHasher, verify_password, hash_password
from blog_api.kernel.identity.jwt import (
    JWTManager,
    TokenPair,
    AccessTokenPayload,
    verify_access_token,
)
from blog_api.kernel.identity.identity_service import IdentityService

__all__ = [
    "CallerIdentity",
    "PasswordHasher",
    "verify_password",
    "hash_password",
    "JWTManager",
    "TokenPair",
    "AccessTokenPayload",
    "verify_access_token",
    "IdentityService",
]
