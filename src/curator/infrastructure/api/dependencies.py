"""FastAPI dependencies shared by the routers.

Provides the per-request database session, the page window parsed from
the ``page``/``limit`` query parameters, and the repositories and services
built on the session.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from curator.core.config import get_settings
from curator.core.pagination import DEFAULT_PAGE, Pagination, get_pagination
from curator.domain.services import MembershipService
from curator.infrastructure.persistence.database import get_db_session
from curator.infrastructure.persistence.repositories import (
    CollectionRecommendationRepository,
    CollectionRepository,
    RecommendationRepository,
    UserRepository,
)

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_page_params(
    page: Annotated[int, Query(description="1-based page number")] = DEFAULT_PAGE,
    limit: Annotated[int | None, Query(description="Page size")] = None,
) -> Pagination:
    """Build the page window for list endpoints.

    ``limit`` falls back to the configured default page size.
    """
    if limit is None:
        limit = get_settings().default_page_size
    return get_pagination(page, limit)


PageParams = Annotated[Pagination, Depends(get_page_params)]


def get_user_repository(session: DbSession) -> UserRepository:
    """Get the user repository."""
    return UserRepository(session)


def get_recommendation_repository(session: DbSession) -> RecommendationRepository:
    """Get the recommendation repository."""
    return RecommendationRepository(session)


def get_collection_repository(session: DbSession) -> CollectionRepository:
    """Get the collection repository."""
    return CollectionRepository(session)


def get_collection_recommendation_repository(
    session: DbSession,
) -> CollectionRecommendationRepository:
    """Get the collection membership repository."""
    return CollectionRecommendationRepository(session)


def get_membership_service(session: DbSession) -> MembershipService:
    """Get the membership service."""
    return MembershipService(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
RecommendationRepo = Annotated[RecommendationRepository, Depends(get_recommendation_repository)]
CollectionRepo = Annotated[CollectionRepository, Depends(get_collection_repository)]
CollectionRecommendationRepo = Annotated[
    CollectionRecommendationRepository, Depends(get_collection_recommendation_repository)
]
MembershipSvc = Annotated[MembershipService, Depends(get_membership_service)]
