"""Pydantic schemas for collection membership operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from curator.infrastructure.api.schemas.recommendation_schemas import (
    RecommendationWithUserResponse,
)


class AddToCollectionRequest(BaseModel):
    """Body of ``POST /add-to-collection``."""

    collection_id: int = Field(..., alias="collectionId", description="Target collection ID")
    recommendation_id: int = Field(
        ..., alias="recommendationId", description="Recommendation to add"
    )
    user_id: int = Field(..., alias="userId", description="Acting user; must own the recommendation")

    model_config = ConfigDict(populate_by_name=True)


class RemoveFromCollectionRequest(BaseModel):
    """Body of ``DELETE /remove-from-collection``."""

    collection_id: int = Field(..., alias="collectionId")
    recommendation_id: int = Field(..., alias="recommendationId")

    model_config = ConfigDict(populate_by_name=True)


class CollectionRecommendationResponse(BaseModel):
    """Schema for a membership row."""

    collection_id: int
    recommendation_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CollectionRecommendationDetailResponse(CollectionRecommendationResponse):
    """Membership row including the recommendation and its author."""

    recommendation: RecommendationWithUserResponse
