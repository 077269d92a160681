"""Router for recommendations."""

from fastapi import APIRouter, HTTPException, status

from curator.core.logging import get_logger
from curator.infrastructure.api.dependencies import PageParams, RecommendationRepo
from curator.infrastructure.api.schemas import RecommendationResponse
from curator.infrastructure.persistence.models import RecommendationModel

router = APIRouter(tags=["Recommendations"])
logger = get_logger(__name__)


@router.get(
    "/recommendations",
    response_model=list[RecommendationResponse],
    summary="List recommendations",
)
async def list_recommendations(
    recommendation_repo: RecommendationRepo, pagination: PageParams
) -> list[RecommendationModel]:
    """List all recommendations, one page at a time."""
    try:
        return await recommendation_repo.list_all(pagination)
    except Exception as e:
        logger.error("Failed to list recommendations", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving recommendations",
        )
