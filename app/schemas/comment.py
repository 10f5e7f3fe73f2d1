"""Pydantic schemas for Comment."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.user import UserSummary


class CommentCreate(BaseModel):
    """Schema for creating a comment."""
    body: str = Field(..., min_length=1, description="Comment content")

    @field_validator("body", mode="before")
    @classmethod
    def strip_body(cls, v):
        return v.strip() if isinstance(v, str) else v


class CommentResponse(BaseModel):
    """Schema for Comment response."""
    id: int
    post_id: int
    body: str
    author: Optional[UserSummary] = None
    like_count: int = 0
    is_liked: bool = False  # Will be populated based on current user
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
