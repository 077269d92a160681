"""Integration tests for adding and removing collection memberships."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from curator.infrastructure.api.app import app
from curator.infrastructure.persistence.database import get_db_session
from curator.infrastructure.persistence.models import CollectionRecommendationModel


async def _membership_count(db_session: AsyncSession) -> int:
    result = await db_session.execute(
        select(func.count()).select_from(CollectionRecommendationModel)
    )
    return result.scalar_one()


def _add_body(collection_id: int, recommendation_id: int, user_id: int) -> dict[str, int]:
    return {
        "collectionId": collection_id,
        "recommendationId": recommendation_id,
        "userId": user_id,
    }


@pytest.mark.asyncio
async def test_owner_adds_recommendation(client: AsyncClient, db_session, curated_data):
    response = await client.post("/add-to-collection", json=_add_body(3, 7, 1))

    assert response.status_code == 200
    assert response.text == "Recommendation added to collection"
    assert response.headers["content-type"].startswith("text/plain")

    result = await db_session.execute(
        select(CollectionRecommendationModel).where(
            CollectionRecommendationModel.collection_id == 3,
            CollectionRecommendationModel.recommendation_id == 7,
        )
    )
    assert result.scalar_one_or_none() is not None


@pytest.mark.asyncio
async def test_owner_adds_to_another_users_collection(
    client: AsyncClient, db_session, curated_data
):
    """Only the recommendation owner is checked; collection 4 belongs to user 2."""
    response = await client.post("/add-to-collection", json=_add_body(4, 7, 1))

    assert response.status_code == 200
    assert await _membership_count(db_session) == 1


@pytest.mark.asyncio
async def test_non_owner_is_forbidden(client: AsyncClient, db_session, curated_data):
    response = await client.post("/add-to-collection", json=_add_body(3, 7, 2))

    assert response.status_code == 403
    assert response.text == "You do not have permission to add this recommendation"
    assert await _membership_count(db_session) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("collection_id", "recommendation_id"),
    [(99, 7), (3, 99), (99, 99)],
)
async def test_missing_entity_is_not_found(
    client: AsyncClient, db_session, curated_data, collection_id, recommendation_id
):
    response = await client.post(
        "/add-to-collection", json=_add_body(collection_id, recommendation_id, 1)
    )

    assert response.status_code == 404
    assert response.text == "Collection or Recommendation not found"
    assert await _membership_count(db_session) == 0


@pytest.mark.asyncio
async def test_duplicate_add_is_conflict(client: AsyncClient, db_session, curated_data):
    first = await client.post("/add-to-collection", json=_add_body(3, 7, 1))
    second = await client.post("/add-to-collection", json=_add_body(3, 7, 1))

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.text == "Recommendation already in collection"
    assert await _membership_count(db_session) == 1


@pytest.mark.asyncio
async def test_add_then_remove_restores_state(client: AsyncClient, db_session, curated_data):
    await client.post("/add-to-collection", json=_add_body(3, 7, 1))

    response = await client.request(
        "DELETE",
        "/remove-from-collection",
        json={"collectionId": 3, "recommendationId": 7},
    )

    assert response.status_code == 200
    assert response.text == "Recommendation removed from collection"
    assert await _membership_count(db_session) == 0


@pytest.mark.asyncio
async def test_remove_missing_membership_is_not_found(
    client: AsyncClient, db_session, curated_data
):
    body = {"collectionId": 3, "recommendationId": 7}

    first = await client.request("DELETE", "/remove-from-collection", json=body)
    second = await client.request("DELETE", "/remove-from-collection", json=body)

    assert first.status_code == 404
    assert first.text == "Recommendation not found in collection"
    assert second.status_code == 404


@pytest.mark.asyncio
async def test_remove_only_deletes_matching_pair(client: AsyncClient, db_session, curated_data):
    await client.post("/add-to-collection", json=_add_body(3, 7, 1))
    await client.post("/add-to-collection", json=_add_body(4, 7, 1))

    response = await client.request(
        "DELETE",
        "/remove-from-collection",
        json={"collectionId": 4, "recommendationId": 7},
    )

    assert response.status_code == 200
    result = await db_session.execute(select(CollectionRecommendationModel.collection_id))
    assert result.scalars().all() == [3]


@pytest.mark.asyncio
async def test_missing_field_is_rejected(client: AsyncClient, curated_data):
    response = await client.post(
        "/add-to-collection", json={"collectionId": 3, "recommendationId": 7}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_snake_case_body_is_accepted(client: AsyncClient, db_session, curated_data):
    response = await client.post(
        "/add-to-collection",
        json={"collection_id": 3, "recommendation_id": 7, "user_id": 1},
    )

    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path", "body", "detail"),
    [
        (
            "POST",
            "/add-to-collection",
            {"collectionId": 3, "recommendationId": 7, "userId": 1},
            "Error adding recommendation to collection",
        ),
        (
            "DELETE",
            "/remove-from-collection",
            {"collectionId": 3, "recommendationId": 7},
            "Error removing recommendation from collection",
        ),
    ],
)
async def test_storage_failure_on_write_is_internal_error(method, path, body, detail):
    """Storage errors become a plain 500; the cause is not sent to the client."""
    failing_session = AsyncMock(spec=AsyncSession)
    failing_session.execute.side_effect = SQLAlchemyError("database is locked")
    app.dependency_overrides[get_db_session] = lambda: failing_session

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            response = await ac.request(method, path, json=body)
    finally:
        app.dependency_overrides = {}

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == detail
    assert "database is locked" not in response.text
    failing_session.commit.assert_not_called()
