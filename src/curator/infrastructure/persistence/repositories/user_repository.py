"""Repository for user database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from curator.core.pagination import Pagination
from curator.infrastructure.persistence.models import UserModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: UserModel) -> UserModel:
        """Insert a user.

        Args:
            user: User model to create.

        Returns:
            Created user model with server defaults loaded.
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> UserModel | None:
        """Get a user by ID.

        Args:
            user_id: User ID.

        Returns:
            User model if found, None otherwise.
        """
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self, pagination: Pagination) -> list[UserModel]:
        """List one page of users in insertion order.

        Args:
            pagination: Page window.

        Returns:
            List of user models.
        """
        result = await self.session.execute(
            select(UserModel)
            .order_by(UserModel.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        return list(result.scalars().all())

    async def delete(self, user: UserModel) -> None:
        """Delete a user together with their recommendations and collections.

        Args:
            user: User model to delete.
        """
        await self.session.delete(user)
        await self.session.flush()
