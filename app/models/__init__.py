"""
SQLAlchemy Models for IMUGOSSIP
"""

from ..database import Base
from .user import User
from .post import Post
from .comment import Comment
from .like import PostLike, CommentLike
from .user_session import UserSession

# Export all models
__all__ = [
    "Base",
    "User",
    "Post",
    "Comment",
    "PostLike",
    "CommentLike",
    "UserSession",
]
