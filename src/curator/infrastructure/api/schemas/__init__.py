"""Request and response schemas for the Curator API."""

from curator.infrastructure.api.schemas.collection_schemas import (
    CollectionDetailResponse,
    CollectionResponse,
)
from curator.infrastructure.api.schemas.membership_schemas import (
    AddToCollectionRequest,
    CollectionRecommendationDetailResponse,
    CollectionRecommendationResponse,
    RemoveFromCollectionRequest,
)
from curator.infrastructure.api.schemas.recommendation_schemas import (
    RecommendationResponse,
    RecommendationWithUserResponse,
)
from curator.infrastructure.api.schemas.user_schemas import UserResponse

__all__ = [
    "AddToCollectionRequest",
    "CollectionDetailResponse",
    "CollectionRecommendationDetailResponse",
    "CollectionRecommendationResponse",
    "CollectionResponse",
    "RecommendationResponse",
    "RecommendationWithUserResponse",
    "RemoveFromCollectionRequest",
    "UserResponse",
]
