"""Pytest configuration for all tests."""

from datetime import datetime
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from curator.infrastructure.persistence import models  # noqa: F401
from curator.infrastructure.persistence.database import Base, register_sqlite_pragmas
from curator.infrastructure.persistence.models import (
    CollectionModel,
    RecommendationModel,
    UserModel,
)

CREATED_AT = datetime(2025, 5, 1, 12, 0)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database with foreign keys enforced.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    register_sqlite_pragmas(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from curator.infrastructure.api.app import app
    from curator.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def curated_data(db_session: AsyncSession) -> dict[str, int]:
    """Seed two users with one recommendation and one collection each.

    User 1 owns recommendation 7 and collection 3.
    User 2 owns recommendation 8 and collection 4.
    """
    db_session.add_all(
        [
            UserModel(id=1, fname="Ada", sname="Lovelace", created_at=CREATED_AT),
            UserModel(
                id=2,
                fname="Alan",
                sname="Turing",
                bio="Likes long walks",
                profile_picture="https://example.com/alan.png",
                created_at=CREATED_AT,
            ),
        ]
    )
    await db_session.flush()
    db_session.add_all(
        [
            RecommendationModel(
                id=7,
                user_id=1,
                title="Dune",
                caption="Read the first three",
                category="books",
                created_at=CREATED_AT,
            ),
            RecommendationModel(
                id=8,
                user_id=2,
                title="Stalker",
                category="films",
                created_at=CREATED_AT,
            ),
            CollectionModel(id=3, user_id=1, title="Weekend", created_at=CREATED_AT),
            CollectionModel(id=4, user_id=2, title="Classics", created_at=CREATED_AT),
        ]
    )
    await db_session.commit()
    return {
        "owner_id": 1,
        "other_user_id": 2,
        "recommendation_id": 7,
        "other_recommendation_id": 8,
        "collection_id": 3,
        "other_collection_id": 4,
    }
