"""
Identity service for user registration and authentication.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.kernel.models.user import User
from blog_api.kernel.identity.password import hash_password, verify_password
from blog_api.kernel.identity.jwt import JWTManager, TokenPair
from blog_api.logging_config import get_logger

logger = get_logger(__name__)


class IdentityService:
    """
    Service for user identity operations.

    Handles user registration, authentication, and lookups.
    """

    def __init__(self, session: AsyncSession, jwt_manager: Optional[JWTManager] = None):
        self.session = session
        self.jwt_manager = jwt_manager or JWTManager()

    async def register_user(
        self,
        name: str,
        email: str,
        password: str,
    ) -> User:
        """
        Register a new user.

        Args:
            name: Display name
            email: User's email address
            password: Plain text password

        Returns:
            The created User object

        Raises:
            ValueError: If email already exists
        """
        existing = await self.get_user_by_email(email)
        if existing:
            raise ValueError("Email already registered")

        user = User(
            name=name.strip(),
            email=email.lower().strip(),
            password_hash=hash_password(password),
        )

        self.session.add(user)
        await self.session.flush()  # Get the ID

        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate(
        self,
        email: str,
        password: str,
    ) -> Optional[tuple[User, TokenPair]]:
        """
        Authenticate a user and return an access token.

        Returns:
            Tuple of (User, TokenPair) if successful, None otherwise
        """
        user = await self.get_user_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            return None

        token = self.jwt_manager.create_access_token(user_id=user.id, email=user.email)
        return user, token

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        query = select(User).where(User.id == user_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        query = select(User).where(User.email == email.lower().strip())
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
