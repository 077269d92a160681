"""Router for adding recommendations to and removing them from collections."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from curator.core.logging import get_logger
from curator.domain.services import (
    MembershipConflictError,
    MembershipForbiddenError,
    MembershipNotFoundError,
)
from curator.infrastructure.api.dependencies import MembershipSvc
from curator.infrastructure.api.schemas import (
    AddToCollectionRequest,
    RemoveFromCollectionRequest,
)

router = APIRouter(tags=["Collection membership"])
logger = get_logger(__name__)


@router.post(
    "/add-to-collection",
    response_class=PlainTextResponse,
    summary="Add a recommendation to a collection",
    responses={
        403: {"description": "Recommendation is owned by another user"},
        404: {"description": "Collection or Recommendation not found"},
        409: {"description": "Recommendation already in collection"},
    },
)
async def add_to_collection(
    membership: AddToCollectionRequest,
    membership_service: MembershipSvc,
) -> str:
    """Add a recommendation to a collection.

    Only the owner of the recommendation may add it. The collection may
    belong to anyone.
    """
    try:
        await membership_service.add_recommendation(
            collection_id=membership.collection_id,
            recommendation_id=membership.recommendation_id,
            user_id=membership.user_id,
        )
    except MembershipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except MembershipForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    except MembershipConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except Exception as e:
        logger.error(
            "Failed to add recommendation to collection",
            collection_id=membership.collection_id,
            recommendation_id=membership.recommendation_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error adding recommendation to collection",
        )

    return "Recommendation added to collection"


@router.delete(
    "/remove-from-collection",
    response_class=PlainTextResponse,
    summary="Remove a recommendation from a collection",
    responses={404: {"description": "Recommendation not found in collection"}},
)
async def remove_from_collection(
    membership: RemoveFromCollectionRequest,
    membership_service: MembershipSvc,
) -> str:
    """Remove a recommendation from a collection."""
    try:
        await membership_service.remove_recommendation(
            collection_id=membership.collection_id,
            recommendation_id=membership.recommendation_id,
        )
    except MembershipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception as e:
        logger.error(
            "Failed to remove recommendation from collection",
            collection_id=membership.collection_id,
            recommendation_id=membership.recommendation_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error removing recommendation from collection",
        )

    return "Recommendation removed from collection"
