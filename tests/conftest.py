"""
Pytest fixtures for blog API tests.

Settings are read when blog_api modules are first imported, so the test
environment is set up before any of them load.
"""

import os
import tempfile
from datetime import datetime
from typing import AsyncGenerator, Optional

_tmp_dir = tempfile.mkdtemp(prefix="blog-api-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmp_dir, 'app.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from blog_api.config import get_settings

get_settings.cache_clear()

from blog_api.database import enable_sqlite_pragmas
from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.identity.jwt import JWTManager
from blog_api.kernel.identity.password import hash_password
from blog_api.kernel.models import Base, Comment, Post, User
from blog_api.kernel.models.base import utcnow


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """File-backed SQLite engine so separate sessions see the same data."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=NullPool,
    )
    enable_sqlite_pragmas(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        yield session
        await session.rollback()


async def _create_user(session: AsyncSession, name: str, email: str) -> User:
    user = User(
        name=name,
        email=email,
        password_hash=hash_password("TestPassword123"),
    )
    session.add(user)
    await session.commit()
    return user


@pytest_asyncio.fixture
async def alice(db_session: AsyncSession) -> User:
    """Create the first test author."""
    return await _create_user(db_session, "Alice", "alice@example.com")


@pytest_asyncio.fixture
async def bob(db_session: AsyncSession) -> User:
    """Create the second test author."""
    return await _create_user(db_session, "Bob", "bob@example.com")


@pytest.fixture
def alice_identity(alice: User) -> CallerIdentity:
    return CallerIdentity.from_user(alice)


@pytest.fixture
def bob_identity(bob: User) -> CallerIdentity:
    return CallerIdentity.from_user(bob)


@pytest.fixture
def make_post(db_session: AsyncSession):
    """Factory that inserts and commits a post, optionally with a fixed timestamp."""

    async def _make(
        owner: User,
        title: str = "Test Post",
        published: bool = True,
        created_at: Optional[datetime] = None,
        content: str = "Post body",
    ) -> Post:
        stamp = created_at or utcnow()
        post = Post(
            owner_id=owner.id,
            title=title,
            content=content,
            published=published,
            created_at=stamp,
            updated_at=stamp,
        )
        db_session.add(post)
        await db_session.commit()
        return post

    return _make


@pytest.fixture
def make_comment(db_session: AsyncSession):
    """Factory that inserts and commits a comment, optionally with a fixed timestamp."""

    async def _make(
        post: Post,
        owner: User,
        content: str = "Nice post",
        created_at: Optional[datetime] = None,
    ) -> Comment:
        stamp = created_at or utcnow()
        comment = Comment(
            post_id=post.id,
            owner_id=owner.id,
            content=content,
            created_at=stamp,
            updated_at=stamp,
        )
        db_session.add(comment)
        await db_session.commit()
        return comment

    return _make


@pytest.fixture
def jwt_manager() -> JWTManager:
    """Create a JWT manager for tests."""
    return JWTManager(
        secret_key="test-secret-key-for-testing-only",
        algorithm="HS256",
        access_token_expire_minutes=30,
    )


@pytest.fixture
def auth_headers(jwt_manager: JWTManager):
    """Build bearer headers for a user."""

    def _headers(user: User) -> dict:
        token = jwt_manager.create_access_token(user_id=user.id, email=user.email)
        return {"Authorization": f"Bearer {token.access_token}"}

    return _headers
