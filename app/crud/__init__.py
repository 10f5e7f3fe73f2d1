"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .user import crud_user
from .user_session import crud_user_session
from .post import crud_post
from .comment import crud_comment
from .like import CRUDLike, crud_post_like, crud_comment_like


__all__ = [
    # Base
    "CRUDBase",
    "CRUDLike",
    # CRUD instances
    "crud_user",
    "crud_user_session",
    "crud_post",
    "crud_comment",
    "crud_post_like",
    "crud_comment_like",
]
