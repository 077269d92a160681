"""Repository for recommendation database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from curator.core.pagination import Pagination
from curator.infrastructure.persistence.models import RecommendationModel


class RecommendationRepository:
    """Repository for recommendation database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, recommendation: RecommendationModel) -> RecommendationModel:
        """Insert a recommendation.

        Args:
            recommendation: Recommendation model to create.

        Returns:
            Created recommendation model.
        """
        self.session.add(recommendation)
        await self.session.flush()
        await self.session.refresh(recommendation)
        return recommendation

    async def get_by_id(self, recommendation_id: int) -> RecommendationModel | None:
        """Get a recommendation by ID.

        Args:
            recommendation_id: Recommendation ID.

        Returns:
            Recommendation model if found, None otherwise.
        """
        result = await self.session.execute(
            select(RecommendationModel).where(RecommendationModel.id == recommendation_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self, pagination: Pagination) -> list[RecommendationModel]:
        """List one page of recommendations in insertion order."""
        result = await self.session.execute(
            select(RecommendationModel)
            .order_by(RecommendationModel.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        return list(result.scalars().all())

    async def list_by_user(
        self, user_id: int, pagination: Pagination
    ) -> list[RecommendationModel]:
        """List one page of the recommendations authored by a user.

        Args:
            user_id: Owning user ID.
            pagination: Page window.

        Returns:
            List of recommendation models.
        """
        result = await self.session.execute(
            select(RecommendationModel)
            .where(RecommendationModel.user_id == user_id)
            .order_by(RecommendationModel.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        return list(result.scalars().all())

    async def delete(self, recommendation: RecommendationModel) -> None:
        """Delete a recommendation and its collection memberships."""
        await self.session.delete(recommendation)
        await self.session.flush()
