"""Repository for collection database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from curator.core.pagination import Pagination
from curator.infrastructure.persistence.models import (
    CollectionModel,
    CollectionRecommendationModel,
    RecommendationModel,
)


class CollectionRepository:
    """Repository for collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: CollectionModel) -> CollectionModel:
        """Insert a collection.

        Args:
            collection: Collection model to create.

        Returns:
            Created collection model.
        """
        self.session.add(collection)
        await self.session.flush()
        await self.session.refresh(collection)
        return collection

    async def get_by_id(self, collection_id: int) -> CollectionModel | None:
        """Get a collection by ID.

        Args:
            collection_id: Collection ID.

        Returns:
            Collection model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CollectionModel).where(CollectionModel.id == collection_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self, pagination: Pagination) -> list[CollectionModel]:
        """List one page of collections in insertion order."""
        result = await self.session.execute(
            select(CollectionModel)
            .order_by(CollectionModel.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        return list(result.scalars().all())

    async def list_by_user_with_recommendations(
        self, user_id: int, pagination: Pagination
    ) -> list[CollectionModel]:
        """List one page of a user's collections with their contents.

        Each collection comes with its membership rows, each membership
        with its recommendation, and each recommendation with its author.

        Args:
            user_id: Owning user ID.
            pagination: Page window over collections.

        Returns:
            List of collection models with relationships loaded.
        """
        result = await self.session.execute(
            select(CollectionModel)
            .where(CollectionModel.user_id == user_id)
            .options(
                selectinload(CollectionModel.collection_recommendations)
                .selectinload(CollectionRecommendationModel.recommendation)
                .selectinload(RecommendationModel.user)
            )
            .order_by(CollectionModel.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def delete(self, collection: CollectionModel) -> None:
        """Delete a collection and its memberships."""
        await self.session.delete(collection)
        await self.session.flush()
