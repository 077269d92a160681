"""Pydantic schemas for recommendation responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from curator.infrastructure.api.schemas.user_schemas import UserResponse


class RecommendationResponse(BaseModel):
    """Schema for recommendation response."""

    id: int = Field(..., description="Recommendation ID")
    user_id: int = Field(..., description="Owning user ID")
    title: str
    caption: str | None = None
    category: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RecommendationWithUserResponse(RecommendationResponse):
    """Recommendation including its author."""

    user: UserResponse
