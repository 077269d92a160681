"""Bulk loading of entities from a fixture document.

Users, recommendations and collections have no HTTP creation endpoint;
they are inserted directly, either from a JSON fixture through
``curator seed`` or by tests.

Fixture layout::

    {
        "users": [{"id": 1, "fname": "Ada", "sname": "Lovelace"}],
        "recommendations": [{"id": 7, "user_id": 1, "title": "...", "category": "books"}],
        "collections": [{"id": 3, "user_id": 1, "title": "Reading list"}],
        "collection_recommendations": [{"collection_id": 3, "recommendation_id": 7}]
    }
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from curator.core.logging import get_logger
from curator.infrastructure.persistence.models import (
    CollectionModel,
    RecommendationModel,
    UserModel,
)
from curator.infrastructure.persistence.repositories import (
    CollectionRecommendationRepository,
    CollectionRepository,
    RecommendationRepository,
    UserRepository,
)

logger = get_logger(__name__)

USER_FIELDS = ("id", "fname", "sname", "profile_picture", "bio", "created_at")
RECOMMENDATION_FIELDS = ("id", "user_id", "title", "caption", "category", "created_at")
COLLECTION_FIELDS = ("id", "user_id", "title", "created_at")


class FixtureError(Exception):
    """Raised when a fixture document is malformed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass
class SeedResult:
    """Number of rows inserted per entity."""

    users: int = 0
    recommendations: int = 0
    collections: int = 0
    collection_recommendations: int = 0


def _pick(row: dict[str, Any], fields: tuple[str, ...], section: str) -> dict[str, Any]:
    if not isinstance(row, dict):
        raise FixtureError(f"Entries in '{section}' must be objects")
    unknown = set(row) - set(fields)
    if unknown:
        raise FixtureError(f"Unknown fields in '{section}': {', '.join(sorted(unknown))}")
    values = dict(row)
    created_at = values.get("created_at")
    if isinstance(created_at, str):
        try:
            values["created_at"] = datetime.fromisoformat(created_at)
        except ValueError as e:
            raise FixtureError(
                f"Invalid created_at in '{section}': {created_at!r}"
            ) from e
    return values


async def load_fixture(session: AsyncSession, data: dict[str, Any]) -> SeedResult:
    """Insert every entity in a fixture document and commit.

    Parents are inserted before children so foreign keys resolve.

    Args:
        session: SQLAlchemy async session.
        data: Parsed fixture document.

    Returns:
        Counts of inserted rows.

    Raises:
        FixtureError: If the document has an unexpected shape.
    """
    if not isinstance(data, dict):
        raise FixtureError("Fixture must be a JSON object")

    result = SeedResult()

    user_repo = UserRepository(session)
    for row in data.get("users", []):
        await user_repo.create(UserModel(**_pick(row, USER_FIELDS, "users")))
        result.users += 1

    recommendation_repo = RecommendationRepository(session)
    for row in data.get("recommendations", []):
        await recommendation_repo.create(
            RecommendationModel(**_pick(row, RECOMMENDATION_FIELDS, "recommendations"))
        )
        result.recommendations += 1

    collection_repo = CollectionRepository(session)
    for row in data.get("collections", []):
        await collection_repo.create(
            CollectionModel(**_pick(row, COLLECTION_FIELDS, "collections"))
        )
        result.collections += 1

    membership_repo = CollectionRecommendationRepository(session)
    for row in data.get("collection_recommendations", []):
        values = _pick(row, ("collection_id", "recommendation_id"), "collection_recommendations")
        await membership_repo.create(values["collection_id"], values["recommendation_id"])
        result.collection_recommendations += 1

    await session.commit()
    logger.info(
        "Fixture loaded",
        users=result.users,
        recommendations=result.recommendations,
        collections=result.collections,
        collection_recommendations=result.collection_recommendations,
    )
    return result
