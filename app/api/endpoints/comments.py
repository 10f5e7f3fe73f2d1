"""Comment endpoints: add, delete, like."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.endpoints.posts import get_post_or_404
from app.api.forms import comment_form
from app.core.exceptions import NotFoundException
from app.core.policy import ensure_can_delete
from app.crud import crud_comment, crud_comment_like
from app.models.comment import Comment
from app.models.post import Post
from app.models.user import User
from app.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Comments"],
)


def get_comment_or_404(comment_id: int, db: Session = Depends(get_db)) -> Comment:
    comment = crud_comment.get_by_id(db, comment_id=comment_id)
    if not comment:
        raise NotFoundException(detail="Yorum bulunamadı")
    return comment


def _back_to_comments(post_id: int) -> RedirectResponse:
    return RedirectResponse(
        url=f"/posts/{post_id}#comments",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post(
    "/posts/{post_id}/comments",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Add comment to post",
)
def create_comment(
    current_user: User = Depends(get_current_user),
    post: Post = Depends(get_post_or_404),
    comment_in: CommentCreate = Depends(comment_form),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """
    Add a comment to a post.

    Raises:
        NotFoundException: 404 if the post doesn't exist
        FormValidationException: 400 if the comment is blank
    """
    comment = crud_comment.create_comment(
        db, post=post, author_id=current_user.id, comment_in=comment_in
    )
    logger.info(f"[COMMENT] Created comment {comment.id} on post {post.id} by user {current_user.id}")
    return _back_to_comments(post.id)


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Delete comment",
    description="""
    Delete a comment and its likes.

    **Access:** Comment author only (admins cannot delete other users' comments)
    """,
)
def delete_comment(
    current_user: User = Depends(get_current_user),
    comment: Comment = Depends(get_comment_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    ensure_can_delete(current_user, comment)

    comment_id, post_id = comment.id, comment.post_id
    crud_comment.delete_comment(db, comment=comment)

    logger.info(f"[COMMENT] Deleted comment {comment_id} by user {current_user.id}")
    return _back_to_comments(post_id)


@router.post(
    "/comments/{comment_id}/like",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Like comment",
)
def like_comment(
    current_user: User = Depends(get_current_user),
    comment: Comment = Depends(get_comment_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    crud_comment_like.like(db, target_id=comment.id, user_id=current_user.id)
    return _back_to_comments(comment.post_id)


@router.post(
    "/comments/{comment_id}/unlike",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Unlike comment",
)
def unlike_comment(
    current_user: User = Depends(get_current_user),
    comment: Comment = Depends(get_comment_or_404),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    crud_comment_like.unlike(db, target_id=comment.id, user_id=current_user.id)
    return _back_to_comments(comment.post_id)


__all__ = ["router"]
