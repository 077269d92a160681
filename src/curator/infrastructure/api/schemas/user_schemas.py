"""Pydantic schemas for user responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Schema for user response."""

    id: int = Field(..., description="User ID")
    fname: str = Field(..., description="First name")
    sname: str = Field(..., description="Surname")
    profile_picture: str | None = Field(None, description="Profile picture URL")
    bio: str | None = Field(None, description="Biography")
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
