"""Unit tests for CollectionRecommendationRepository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from curator.core.pagination import get_pagination
from curator.infrastructure.persistence.models import CollectionRecommendationModel
from curator.infrastructure.persistence.repositories import (
    CollectionRecommendationRepository,
)


@pytest.fixture
def mock_session():
    """Create a mock database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def membership_repo(mock_session):
    return CollectionRecommendationRepository(mock_session)


@pytest.mark.asyncio
async def test_create(membership_repo, mock_session):
    """Test adding a recommendation to a collection."""
    result = await membership_repo.create(3, 7)

    mock_session.add.assert_called_once()
    added = mock_session.add.call_args[0][0]
    assert isinstance(added, CollectionRecommendationModel)
    assert (added.collection_id, added.recommendation_id) == (3, 7)
    assert result is added
    mock_session.flush.assert_called_once()


@pytest.mark.asyncio
async def test_delete_by_key_returns_rowcount(membership_repo, mock_session):
    mock_session.execute.return_value = MagicMock(rowcount=1)

    deleted = await membership_repo.delete_by_key(3, 7)

    assert deleted == 1
    mock_session.execute.assert_called_once()
    mock_session.flush.assert_called_once()


@pytest.mark.asyncio
async def test_delete_by_key_nothing_matched(membership_repo, mock_session):
    mock_session.execute.return_value = MagicMock(rowcount=0)

    assert await membership_repo.delete_by_key(3, 99) == 0


@pytest.mark.asyncio
async def test_exists(membership_repo, mock_session):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = CollectionRecommendationModel(
        collection_id=3, recommendation_id=7
    )
    mock_session.execute.return_value = mock_result

    assert await membership_repo.exists(3, 7) is True

    mock_result.scalar_one_or_none.return_value = None
    assert await membership_repo.exists(3, 8) is False


@pytest.mark.asyncio
async def test_list_all_applies_pagination(membership_repo, mock_session):
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = []
    mock_session.execute.return_value = mock_result

    await membership_repo.list_all(get_pagination(3, 10))

    statement = mock_session.execute.call_args[0][0]
    compiled = statement.compile(compile_kwargs={"literal_binds": True})
    assert "LIMIT 10" in str(compiled)
    assert "OFFSET 20" in str(compiled)
