"""Pydantic schemas for Post (campus forum)."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.category import CategoryInfo
from app.schemas.comment import CommentResponse
from app.schemas.user import UserResponse, UserSummary


class PostBase(BaseModel):
    """Base schema for Post."""
    title: str = Field(..., min_length=1, max_length=500, description="Post title")
    body: str = Field(..., min_length=1, description="Post content")
    category: str = Field(..., min_length=1, max_length=100, description="Post category name")

    @field_validator("title", "body", "category", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class PostCreate(PostBase):
    """Schema for creating a new post."""
    pass


class PostUpdate(PostBase):
    """Schema for editing a post. The edit form always resubmits every text field."""
    pass


class PostResponse(PostBase):
    """Schema for Post response."""
    id: int
    author_id: int
    author: Optional[UserSummary] = None
    image_path: Optional[str] = None
    like_count: int = 0
    comment_count: int = 0
    is_liked: bool = False  # Will be populated based on current user
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostDetailResponse(PostResponse):
    """Detailed post response with comments (oldest first)."""
    comments: List[CommentResponse] = []
    current_user: Optional[UserResponse] = None


class CategoryPageResponse(BaseModel):
    """Posts of one category, newest first."""
    category: str
    icon: str
    description: str
    posts: List[PostResponse]
    total: int = 0  # all posts in the category, not just this page
    current_user: Optional[UserResponse] = None


class PostFormResponse(BaseModel):
    """View model for the new/edit post forms."""
    selected_category: str = ""
    categories: List[CategoryInfo]
    post: Optional[PostResponse] = None


class AdminPostListResponse(BaseModel):
    """All posts for the admin panel, newest first."""
    posts: List[PostResponse]
    total: int
    current_user: Optional[UserResponse] = None
