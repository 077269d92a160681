"""Collection membership rules.

Adding a recommendation to a collection requires both to exist and the
caller to own the recommendation. Ownership of the collection is not
checked, so a user may add their own recommendation to another user's
collection. A pair can be added once; repeating the add is a conflict.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from curator.core.logging import get_logger
from curator.infrastructure.persistence.models import CollectionRecommendationModel
from curator.infrastructure.persistence.repositories import (
    CollectionRecommendationRepository,
    CollectionRepository,
    RecommendationRepository,
)

logger = get_logger(__name__)


class MembershipError(Exception):
    """Base error for collection membership operations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MembershipNotFoundError(MembershipError):
    """Raised when a collection, recommendation or membership is missing."""


class MembershipForbiddenError(MembershipError):
    """Raised when the caller does not own the recommendation."""


class MembershipConflictError(MembershipError):
    """Raised when the recommendation is already in the collection."""


class MembershipService:
    """Service for adding recommendations to and removing them from collections."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the membership service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.collection_repo = CollectionRepository(session)
        self.recommendation_repo = RecommendationRepository(session)
        self.membership_repo = CollectionRecommendationRepository(session)

    async def add_recommendation(
        self, collection_id: int, recommendation_id: int, user_id: int
    ) -> CollectionRecommendationModel:
        """Add a recommendation to a collection on behalf of a user.

        Args:
            collection_id: Target collection.
            recommendation_id: Recommendation to add.
            user_id: Acting user; must own the recommendation.

        Returns:
            The created membership row.

        Raises:
            MembershipNotFoundError: If the collection or recommendation is missing.
            MembershipForbiddenError: If the user does not own the recommendation.
            MembershipConflictError: If the pair already exists.
        """
        collection = await self.collection_repo.get_by_id(collection_id)
        recommendation = await self.recommendation_repo.get_by_id(recommendation_id)

        if collection is None or recommendation is None:
            raise MembershipNotFoundError("Collection or Recommendation not found")

        if recommendation.user_id != user_id:
            logger.info(
                "Membership add denied: not the recommendation owner",
                recommendation_id=recommendation_id,
                owner_id=recommendation.user_id,
                user_id=user_id,
            )
            raise MembershipForbiddenError(
                "You do not have permission to add this recommendation"
            )

        if await self.membership_repo.exists(collection_id, recommendation_id):
            raise MembershipConflictError("Recommendation already in collection")

        try:
            membership = await self.membership_repo.create(collection_id, recommendation_id)
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent add of the same pair
            await self.session.rollback()
            logger.warning(
                "Membership insert rejected by database",
                collection_id=collection_id,
                recommendation_id=recommendation_id,
                error=str(e.orig),
            )
            raise MembershipConflictError("Recommendation already in collection") from e

        logger.info(
            "Recommendation added to collection",
            collection_id=collection_id,
            recommendation_id=recommendation_id,
            user_id=user_id,
        )
        return membership

    async def remove_recommendation(self, collection_id: int, recommendation_id: int) -> None:
        """Remove a recommendation from a collection.

        Args:
            collection_id: Collection ID.
            recommendation_id: Recommendation ID.

        Raises:
            MembershipNotFoundError: If the pair does not exist.
        """
        deleted = await self.membership_repo.delete_by_key(collection_id, recommendation_id)
        if not deleted:
            raise MembershipNotFoundError("Recommendation not found in collection")

        await self.session.commit()
        logger.info(
            "Recommendation removed from collection",
            collection_id=collection_id,
            recommendation_id=recommendation_id,
        )
