"""Pydantic schemas for the category catalogue and landing page."""

from typing import List, Optional
from pydantic import BaseModel

from app.schemas.user import UserResponse


class CategoryInfo(BaseModel):
    name: str
    icon: str
    description: str
    post_count: int = 0


class HomeResponse(BaseModel):
    """Landing page: category catalogue plus the logged-in user (if any)."""
    categories: List[CategoryInfo]
    current_user: Optional[UserResponse] = None
