"""Pydantic schemas for collection responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from curator.infrastructure.api.schemas.membership_schemas import (
    CollectionRecommendationDetailResponse,
)


class CollectionResponse(BaseModel):
    """Schema for collection response."""

    id: int = Field(..., description="Collection ID")
    user_id: int = Field(..., description="Owning user ID")
    title: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CollectionDetailResponse(CollectionResponse):
    """Collection including its memberships and their recommendations."""

    collection_recommendations: list[CollectionRecommendationDetailResponse] = Field(
        default_factory=list
    )
