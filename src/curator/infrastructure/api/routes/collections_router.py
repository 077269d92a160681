"""Router for collections and their membership rows."""

from fastapi import APIRouter, HTTPException, status

from curator.core.logging import get_logger
from curator.infrastructure.api.dependencies import (
    CollectionRecommendationRepo,
    CollectionRepo,
    PageParams,
)
from curator.infrastructure.api.schemas import (
    CollectionRecommendationDetailResponse,
    CollectionRecommendationResponse,
    CollectionResponse,
)
from curator.infrastructure.persistence.models import (
    CollectionModel,
    CollectionRecommendationModel,
)

router = APIRouter(tags=["Collections"])
logger = get_logger(__name__)


@router.get(
    "/collections",
    response_model=list[CollectionResponse],
    summary="List collections",
)
async def list_collections(
    collection_repo: CollectionRepo, pagination: PageParams
) -> list[CollectionModel]:
    """List all collections, one page at a time."""
    try:
        return await collection_repo.list_all(pagination)
    except Exception as e:
        logger.error("Failed to list collections", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving collections",
        )


@router.get(
    "/collection/{collection_id}/recommendations",
    response_model=list[CollectionRecommendationDetailResponse],
    summary="List the recommendations in a collection",
)
async def list_collection_recommendations(
    collection_id: int,
    membership_repo: CollectionRecommendationRepo,
    pagination: PageParams,
) -> list[CollectionRecommendationModel]:
    """List a collection's membership rows with recommendations and authors.

    An unknown collection yields an empty list, not a 404.
    """
    try:
        return await membership_repo.list_by_collection_with_recommendations(
            collection_id, pagination
        )
    except Exception as e:
        logger.error(
            "Failed to list collection recommendations",
            collection_id=collection_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving recommendations",
        )


@router.get(
    "/collection-recommendations",
    response_model=list[CollectionRecommendationResponse],
    summary="List all collection memberships",
)
async def list_all_collection_recommendations(
    membership_repo: CollectionRecommendationRepo, pagination: PageParams
) -> list[CollectionRecommendationModel]:
    """List every membership row, one page at a time."""
    try:
        return await membership_repo.list_all(pagination)
    except Exception as e:
        logger.error("Failed to list collection memberships", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving collection recommendations",
        )
