"""Public pages: landing, category listing, profile."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db, get_optional_current_user
from app.api.responses import build_category_catalogue, enrich_post_list, user_response
from app.core.categories import get_category_info
from app.crud import crud_post
from app.models.user import User
from app.schemas.category import HomeResponse
from app.schemas.post import CategoryPageResponse
from app.schemas.user import UserResponse

router = APIRouter(
    tags=["Pages"],
)


@router.get(
    "/",
    response_model=HomeResponse,
    status_code=status.HTTP_200_OK,
    summary="Landing page",
)
def home(
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> HomeResponse:
    """Category catalogue with post counts."""
    return HomeResponse(
        categories=build_category_catalogue(db),
        current_user=user_response(current_user),
    )


@router.get(
    "/category/{category_name}",
    response_model=CategoryPageResponse,
    status_code=status.HTTP_200_OK,
    summary="List posts in a category",
    description="""
    Posts of one category, newest first. Paged with `skip` / `limit`;
    `total` is the number of posts in the whole category.

    Unknown categories are listed too (usually empty) with a generic icon.

    **Access:** Public
    """,
)
def category_page(
    category_name: str,
    skip: int = Query(0, ge=0, description="Number of posts to skip"),
    limit: int = Query(100, ge=1, le=500, description="Maximum number of posts to return"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> CategoryPageResponse:
    posts = crud_post.get_by_category(db, category=category_name, skip=skip, limit=limit)
    icon, description = get_category_info(category_name)

    return CategoryPageResponse(
        category=category_name,
        icon=icon,
        description=description,
        posts=enrich_post_list(db, posts, current_user),
        total=crud_post.count_in_category(db, category=category_name),
        current_user=user_response(current_user),
    )


@router.get(
    "/profile",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Get current user info",
)
def profile(
    current_user: User = Depends(get_current_user),
) -> User:
    return current_user


__all__ = ["router"]
