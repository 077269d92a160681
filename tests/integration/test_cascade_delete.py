"""Integration tests for delete cascades across the entity graph."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from curator.infrastructure.persistence.models import (
    CollectionModel,
    CollectionRecommendationModel,
    RecommendationModel,
    UserModel,
)
from curator.infrastructure.persistence.repositories import (
    CollectionRecommendationRepository,
    CollectionRepository,
    RecommendationRepository,
    UserRepository,
)


async def _count(db_session: AsyncSession, model) -> int:
    result = await db_session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


@pytest.fixture
def membership_rows(db_session: AsyncSession):
    async def _create() -> None:
        repo = CollectionRecommendationRepository(db_session)
        await repo.create(3, 7)
        await repo.create(4, 7)
        await repo.create(4, 8)
        await db_session.commit()

    return _create


@pytest.mark.asyncio
async def test_deleting_user_removes_owned_rows(db_session, curated_data, membership_rows):
    await membership_rows()
    user_repo = UserRepository(db_session)

    await user_repo.delete(await user_repo.get_by_id(1))
    await db_session.commit()

    assert await _count(db_session, UserModel) == 1
    remaining_recommendations = await db_session.execute(select(RecommendationModel.id))
    assert remaining_recommendations.scalars().all() == [8]
    remaining_collections = await db_session.execute(select(CollectionModel.id))
    assert remaining_collections.scalars().all() == [4]
    # (4, 7) goes with recommendation 7 even though collection 4 survives
    remaining_pairs = await db_session.execute(
        select(
            CollectionRecommendationModel.collection_id,
            CollectionRecommendationModel.recommendation_id,
        )
    )
    assert remaining_pairs.all() == [(4, 8)]


@pytest.mark.asyncio
async def test_deleting_collection_removes_memberships(db_session, curated_data, membership_rows):
    await membership_rows()
    collection_repo = CollectionRepository(db_session)

    await collection_repo.delete(await collection_repo.get_by_id(4))
    await db_session.commit()

    assert await _count(db_session, CollectionModel) == 1
    assert await _count(db_session, RecommendationModel) == 2
    assert await _count(db_session, CollectionRecommendationModel) == 1


@pytest.mark.asyncio
async def test_deleting_recommendation_removes_memberships(
    db_session, curated_data, membership_rows
):
    await membership_rows()
    recommendation_repo = RecommendationRepository(db_session)

    await recommendation_repo.delete(await recommendation_repo.get_by_id(7))
    await db_session.commit()

    assert await _count(db_session, CollectionModel) == 2
    assert await _count(db_session, CollectionRecommendationModel) == 1


@pytest.mark.asyncio
async def test_membership_requires_existing_rows(db_session, curated_data):
    """Foreign keys are enforced on SQLite too."""
    repo = CollectionRecommendationRepository(db_session)

    with pytest.raises(IntegrityError):
        await repo.create(3, 999)

    await db_session.rollback()
