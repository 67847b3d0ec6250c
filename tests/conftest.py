"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from canary.core.config import get_settings
from tests.models import Base, Comment, Post


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Create a session factory bound to an in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_posts(session_factory) -> list[Post]:
    """Insert two posts, the first one with two comments."""
    async with session_factory() as session:
        posts = [
            Post(id="post-1", slug="hello-world", title="Hello World", author_id="usr_1"),
            Post(id="post-2", slug="second", title="Second", author_id="usr_2"),
        ]
        session.add_all(posts)
        session.add_all(
            [
                Comment(id="cmt-1", post_id="post-1", body="First!"),
                Comment(id="cmt-2", post_id="post-1", body="Nice post"),
            ]
        )
        await session.commit()
    return posts
