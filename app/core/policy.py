"""Ownership and authorization rules for forum content.

A post or comment belongs to the user who created it. Only that user may
edit it. Deletion follows the same rule, except that an admin may delete
any post (but not someone else's comment). Anonymous actors may do
neither.
"""

import logging
from typing import Optional, Union

from app.core.exceptions import ForbiddenException
from app.models.comment import Comment
from app.models.post import Post
from app.models.user import User

logger = logging.getLogger(__name__)

Content = Union[Post, Comment]


def is_owner(actor: Optional[User], content: Content) -> bool:
    return actor is not None and content.author_id == actor.id


def is_admin(actor: Optional[User]) -> bool:
    return actor is not None and bool(actor.is_admin)


def can_mutate(actor: Optional[User], content: Content) -> bool:
    """Whether `actor` may edit `content`."""
    return is_owner(actor, content)


def can_delete(actor: Optional[User], content: Content) -> bool:
    """Whether `actor` may delete `content`."""
    if is_owner(actor, content):
        return True
    return isinstance(content, Post) and is_admin(actor)


def ensure_can_mutate(actor: Optional[User], content: Content) -> None:
    """Raise 403 unless `actor` may edit `content`."""
    if not can_mutate(actor, content):
        logger.warning(
            f"[POLICY] Mutation denied: user={getattr(actor, 'id', None)} "
            f"{type(content).__name__.lower()}={content.id}"
        )
        raise ForbiddenException()


def ensure_can_delete(actor: Optional[User], content: Content) -> None:
    """Raise 403 unless `actor` may delete `content`."""
    if not can_delete(actor, content):
        logger.warning(
            f"[POLICY] Delete denied: user={getattr(actor, 'id', None)} "
            f"{type(content).__name__.lower()}={content.id}"
        )
        raise ForbiddenException()


__all__ = [
    "is_owner",
    "is_admin",
    "can_mutate",
    "can_delete",
    "ensure_can_mutate",
    "ensure_can_delete",
]
