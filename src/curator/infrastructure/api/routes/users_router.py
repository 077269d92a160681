"""Router for users and the collections they own."""

from fastapi import APIRouter, HTTPException, status

from curator.core.logging import get_logger
from curator.infrastructure.api.dependencies import CollectionRepo, PageParams, UserRepo
from curator.infrastructure.api.schemas import CollectionDetailResponse, UserResponse
from curator.infrastructure.persistence.models import CollectionModel, UserModel

router = APIRouter(tags=["Users"])
logger = get_logger(__name__)


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(user_repo: UserRepo, pagination: PageParams) -> list[UserModel]:
    """List all users, one page at a time."""
    try:
        return await user_repo.list_all(pagination)
    except Exception as e:
        logger.error("Failed to list users", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving users",
        )


@router.get(
    "/user/{user_id}/collections",
    response_model=list[CollectionDetailResponse],
    summary="List a user's collections with their recommendations",
    responses={404: {"description": "User not found"}},
)
async def list_user_collections(
    user_id: int,
    user_repo: UserRepo,
    collection_repo: CollectionRepo,
    pagination: PageParams,
) -> list[CollectionModel]:
    """List a user's collections.

    Each collection includes its membership rows, each with the
    recommendation and the recommendation's author.
    """
    try:
        user = await user_repo.get_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )

        return await collection_repo.list_by_user_with_recommendations(user_id, pagination)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Failed to list user collections", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving collections",
        )
