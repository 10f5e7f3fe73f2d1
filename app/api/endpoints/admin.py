"""Admin panel: list every post, remove any post."""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.api.deps import get_current_admin_user, get_db
from app.api.endpoints.posts import delete_post_and_image, get_post_or_404
from app.api.responses import enrich_post_list, user_response
from app.crud import crud_post
from app.models.post import Post
from app.models.user import User
from app.schemas.post import AdminPostListResponse

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
)


@router.get(
    "",
    response_model=AdminPostListResponse,
    status_code=status.HTTP_200_OK,
    summary="Admin panel",
    description="""
    All posts across categories, newest first. Paged with `skip` / `limit`;
    `total` is the number of posts overall.

    **Access:** Admin only
    """,
)
def admin_panel(
    skip: int = Query(0, ge=0, description="Number of posts to skip"),
    limit: int = Query(500, ge=1, le=1000, description="Maximum number of posts to return"),
    current_user: User = Depends(get_current_admin_user),
    db: Session = Depends(get_db),
) -> AdminPostListResponse:
    posts = crud_post.get_all(db, skip=skip, limit=limit)
    return AdminPostListResponse(
        posts=enrich_post_list(db, posts, current_user),
        total=crud_post.count(db),
        current_user=user_response(current_user),
    )


@router.delete(
    "/posts/{post_id}",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Delete any post (admin)",
)
def admin_delete_post(
    current_user: User = Depends(get_current_admin_user),
    post: Post = Depends(get_post_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    delete_post_and_image(db, post, current_user)
    return RedirectResponse(url="/admin", status_code=status.HTTP_303_SEE_OTHER)


__all__ = ["router"]
