"""Builders that turn ORM objects into response schemas for the current viewer."""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.categories import CATEGORY_INFO, get_category_info, list_category_names
from app.crud import crud_comment, crud_comment_like, crud_post, crud_post_like
from app.models.comment import Comment
from app.models.post import Post
from app.models.user import User
from app.schemas.category import CategoryInfo
from app.schemas.comment import CommentResponse
from app.schemas.post import PostDetailResponse, PostResponse
from app.schemas.user import UserResponse, UserSummary


def user_response(user: Optional[User]) -> Optional[UserResponse]:
    return UserResponse.model_validate(user) if user else None


def enrich_post_response(
    db: Session,
    post: Post,
    current_user: Optional[User] = None
) -> PostResponse:
    """Enrich post with author info, counts and like status."""
    is_liked = False
    if current_user:
        is_liked = crud_post_like.is_liked(db, target_id=post.id, user_id=current_user.id)

    return PostResponse(
        id=post.id,
        author_id=post.author_id,
        author=UserSummary.model_validate(post.author) if post.author else None,
        title=post.title,
        body=post.body,
        category=post.category,
        image_path=post.image_path,
        like_count=crud_post_like.count_for(db, target_id=post.id),
        comment_count=crud_post.count_comments(db, post_id=post.id),
        is_liked=is_liked,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def enrich_post_list(
    db: Session,
    posts: List[Post],
    current_user: Optional[User] = None
) -> List[PostResponse]:
    return [enrich_post_response(db, post, current_user) for post in posts]


def enrich_comment_response(
    db: Session,
    comment: Comment,
    liked: bool = False
) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        post_id=comment.post_id,
        body=comment.body,
        author=UserSummary.model_validate(comment.author) if comment.author else None,
        like_count=crud_comment_like.count_for(db, target_id=comment.id),
        is_liked=liked,
        created_at=comment.created_at,
    )


def build_post_detail(
    db: Session,
    post: Post,
    current_user: Optional[User] = None
) -> PostDetailResponse:
    """Post with its comments (oldest first) as seen by `current_user`."""
    comments = crud_comment.get_by_post(db, post_id=post.id)

    liked_ids = set()
    if current_user:
        liked_ids = crud_comment_like.liked_target_ids(
            db, user_id=current_user.id, target_ids=[c.id for c in comments]
        )

    enriched_post = enrich_post_response(db, post, current_user)
    return PostDetailResponse(
        **enriched_post.model_dump(),
        comments=[enrich_comment_response(db, c, c.id in liked_ids) for c in comments],
        current_user=user_response(current_user),
    )


def build_category_catalogue(db: Session) -> List[CategoryInfo]:
    """Known categories in catalogue order, followed by any other category in use."""
    counts = crud_post.count_by_category(db)
    names = list_category_names()
    names += sorted(name for name in counts if name not in CATEGORY_INFO)

    catalogue = []
    for name in names:
        icon, description = get_category_info(name)
        catalogue.append(CategoryInfo(
            name=name,
            icon=icon,
            description=description,
            post_count=counts.get(name, 0),
        ))
    return catalogue
