"""Repository for collection membership database operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from curator.core.pagination import Pagination
from curator.infrastructure.persistence.models import (
    CollectionRecommendationModel,
    RecommendationModel,
)


class CollectionRecommendationRepository:
    """Repository for rows of the collection_recommendations junction table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    @staticmethod
    def _key_clause(collection_id: int, recommendation_id: int):
        return (CollectionRecommendationModel.collection_id == collection_id) & (
            CollectionRecommendationModel.recommendation_id == recommendation_id
        )

    async def create(
        self, collection_id: int, recommendation_id: int
    ) -> CollectionRecommendationModel:
        """Add a recommendation to a collection.

        Args:
            collection_id: Collection ID.
            recommendation_id: Recommendation ID.

        Returns:
            Created membership row.

        Raises:
            IntegrityError: If the pair already exists or a key is dangling.
        """
        membership = CollectionRecommendationModel(
            collection_id=collection_id,
            recommendation_id=recommendation_id,
        )
        self.session.add(membership)
        await self.session.flush()
        return membership

    async def get(
        self, collection_id: int, recommendation_id: int
    ) -> CollectionRecommendationModel | None:
        """Get a membership row by its composite key."""
        result = await self.session.execute(
            select(CollectionRecommendationModel).where(
                self._key_clause(collection_id, recommendation_id)
            )
        )
        return result.scalar_one_or_none()

    async def exists(self, collection_id: int, recommendation_id: int) -> bool:
        """Check whether a recommendation is in a collection.

        Args:
            collection_id: Collection ID.
            recommendation_id: Recommendation ID.

        Returns:
            True if the pair exists, False otherwise.
        """
        return await self.get(collection_id, recommendation_id) is not None

    async def delete_by_key(self, collection_id: int, recommendation_id: int) -> int:
        """Remove a recommendation from a collection.

        Args:
            collection_id: Collection ID.
            recommendation_id: Recommendation ID.

        Returns:
            Number of rows deleted (0 or 1).
        """
        result = await self.session.execute(
            delete(CollectionRecommendationModel).where(
                self._key_clause(collection_id, recommendation_id)
            )
        )
        await self.session.flush()
        return result.rowcount or 0

    async def list_all(self, pagination: Pagination) -> list[CollectionRecommendationModel]:
        """List one page of membership rows in insertion order."""
        result = await self.session.execute(
            select(CollectionRecommendationModel)
            .order_by(
                CollectionRecommendationModel.created_at,
                CollectionRecommendationModel.collection_id,
                CollectionRecommendationModel.recommendation_id,
            )
            .offset(pagination.offset)
            .limit(pagination.limit)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list_by_collection_with_recommendations(
        self, collection_id: int, pagination: Pagination
    ) -> list[CollectionRecommendationModel]:
        """List one page of a collection's memberships with recommendations.

        The collection itself is not checked for existence; an unknown ID
        yields an empty list.

        Args:
            collection_id: Collection ID.
            pagination: Page window.

        Returns:
            Membership rows with recommendation and its author loaded.
        """
        result = await self.session.execute(
            select(CollectionRecommendationModel)
            .where(CollectionRecommendationModel.collection_id == collection_id)
            .options(
                selectinload(CollectionRecommendationModel.recommendation).selectinload(
                    RecommendationModel.user
                )
            )
            .order_by(
                CollectionRecommendationModel.created_at,
                CollectionRecommendationModel.recommendation_id,
            )
            .offset(pagination.offset)
            .limit(pagination.limit)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
