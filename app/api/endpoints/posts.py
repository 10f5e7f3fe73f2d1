"""Post endpoints: create, view, edit, delete, like."""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db, get_optional_current_user
from app.api.forms import post_create_form, post_update_form
from app.api.responses import (
    build_category_catalogue,
    build_post_detail,
    enrich_post_response,
)
from app.core.exceptions import NotFoundException
from app.core.policy import ensure_can_delete, ensure_can_mutate
from app.crud import crud_post, crud_post_like
from app.models.post import Post
from app.models.user import User
from app.schemas.post import PostCreate, PostDetailResponse, PostFormResponse, PostUpdate
from app.utils.file_handler import delete_image, has_upload, save_image_upload

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
)

POST_NOT_FOUND = "Post bulunamadı"


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


def get_post_or_404(post_id: int, db: Session = Depends(get_db)) -> Post:
    post = crud_post.get_by_id(db, post_id=post_id)
    if not post:
        raise NotFoundException(detail=POST_NOT_FOUND)
    return post


def get_editable_post(
    current_user: User = Depends(get_current_user),
    post: Post = Depends(get_post_or_404),
) -> Post:
    """The requested post, provided the logged-in user owns it."""
    ensure_can_mutate(current_user, post)
    return post


def delete_post_and_image(db: Session, post: Post, actor: User) -> None:
    """Delete the record first, then its image, so no row ever points at a missing file."""
    post_id, image_path = post.id, post.image_path
    crud_post.delete_post(db, post=post)
    if image_path:
        delete_image(image_path)
    logger.info(f"[POST] Deleted post {post_id} by user {actor.id} (admin={bool(actor.is_admin)})")


@router.get(
    "/new",
    response_model=PostFormResponse,
    status_code=status.HTTP_200_OK,
    summary="New post form",
)
def new_post_form(
    category: str = Query("", description="Preselected category"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PostFormResponse:
    return PostFormResponse(
        selected_category=category,
        categories=build_category_catalogue(db),
    )


@router.post(
    "",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Create new post",
    description="""
    Create a post from a multipart form (`title`, `body`, `category`, optional file `image`).

    Images must be `image/*`, at most 5MB. Redirects to the post's category page.

    **Access:** Logged-in users
    """,
)
def create_post(
    current_user: User = Depends(get_current_user),
    post_in: PostCreate = Depends(post_create_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    image_path = save_image_upload(image) if has_upload(image) else None

    try:
        post = crud_post.create_post(
            db, author_id=current_user.id, post_in=post_in, image_path=image_path
        )
    except Exception:
        if image_path:
            delete_image(image_path)
        raise

    logger.info(f"[POST] Created post {post.id} in '{post.category}' by user {current_user.id}")
    return _redirect(f"/category/{quote(post.category)}")


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get post detail",
    description="""
    Get post detail with all comments (oldest first).

    **Access:** Public
    """,
)
def get_post_detail(
    post: Post = Depends(get_post_or_404),
    current_user: Optional[User] = Depends(get_optional_current_user),
    db: Session = Depends(get_db),
) -> PostDetailResponse:
    return build_post_detail(db, post, current_user)


@router.get(
    "/{post_id}/edit",
    response_model=PostFormResponse,
    status_code=status.HTTP_200_OK,
    summary="Edit post form",
)
def edit_post_form(
    post: Post = Depends(get_editable_post),
    db: Session = Depends(get_db),
) -> PostFormResponse:
    return PostFormResponse(
        selected_category=post.category,
        categories=build_category_catalogue(db),
        post=enrich_post_response(db, post),
    )


@router.put(
    "/{post_id}/edit",
    status_code=status.HTTP_303_SEE_OTHER,
    include_in_schema=False,
)
@router.put(
    "/{post_id}",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Update post",
    description="""
    Update title, body and category, optionally replacing the image.

    The previous image file is removed once the update is saved.

    **Access:** Post author only
    """,
)
def update_post(
    post: Post = Depends(get_editable_post),
    post_in: PostUpdate = Depends(post_update_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    new_image = save_image_upload(image) if has_upload(image) else None
    old_image = post.image_path if new_image else None

    try:
        crud_post.update_post(db, post=post, post_in=post_in, image_path=new_image)
    except Exception:
        if new_image:
            delete_image(new_image)
        raise

    if old_image:
        delete_image(old_image)

    logger.info(f"[POST] Updated post {post.id}")
    return _redirect(f"/posts/{post.id}")


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Delete post",
    description="""
    Delete a post with its comments, likes and image.

    **Access:** Post author or admin
    """,
)
def delete_post(
    current_user: User = Depends(get_current_user),
    post: Post = Depends(get_post_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    ensure_can_delete(current_user, post)
    delete_post_and_image(db, post, current_user)
    return _redirect("/")


@router.post(
    "/{post_id}/like",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Like post",
)
def like_post(
    current_user: User = Depends(get_current_user),
    post: Post = Depends(get_post_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    crud_post_like.like(db, target_id=post.id, user_id=current_user.id)
    return _redirect(f"/posts/{post.id}#likes")


@router.post(
    "/{post_id}/unlike",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Unlike post",
)
def unlike_post(
    current_user: User = Depends(get_current_user),
    post: Post = Depends(get_post_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    crud_post_like.unlike(db, target_id=post.id, user_id=current_user.id)
    return _redirect(f"/posts/{post.id}#likes")


__all__ = ["router", "get_post_or_404", "delete_post_and_image"]
