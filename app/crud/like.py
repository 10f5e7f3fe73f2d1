"""Like ledger: idempotent set membership of users in a post's or comment's liked-by set."""

import logging
from typing import Any, Dict, Iterable, Set, Type

from sqlalchemy import and_, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase, ModelType
from app.models.like import CommentLike, PostLike

logger = logging.getLogger(__name__)


class CRUDLike(CRUDBase[ModelType, dict, dict]):
    """Like/unlike operations, shared by posts and comments.

    `target_field` names the foreign key column pointing at the liked object
    (``post_id`` or ``comment_id``). Counts are always derived from the rows.
    """

    def __init__(self, model: Type[ModelType], target_field: str):
        super().__init__(model)
        self.target_field = target_field
        self.target_column = getattr(model, target_field)

    def _membership(self, target_id: int, user_id: int):
        return and_(
            self.target_column == target_id,
            self.model.user_id == user_id,
        )

    def is_liked(self, db: Session, *, target_id: int, user_id: int) -> bool:
        """Check if user has liked the target."""
        stmt = select(self.model.id).where(self._membership(target_id, user_id)).limit(1)
        return db.scalars(stmt).first() is not None

    def like(self, db: Session, *, target_id: int, user_id: int) -> bool:
        """
        Add user to the target's liked-by set.

        Returns:
            True if the like was added, False if it already existed
        """
        if self.is_liked(db, target_id=target_id, user_id=user_id):
            return False

        data: Dict[str, Any] = {self.target_field: target_id, "user_id": user_id}
        try:
            db.add(self.model(**data))
            db.commit()
        except IntegrityError:
            # A concurrent request inserted the same pair first
            db.rollback()
            logger.info(
                f"[LIKE] Duplicate like ignored: {self.target_field}={target_id}, user_id={user_id}"
            )
            return False
        except Exception:
            db.rollback()
            raise
        return True

    def unlike(self, db: Session, *, target_id: int, user_id: int) -> bool:
        """
        Remove user from the target's liked-by set.

        Returns:
            True if a like was removed, False if there was none
        """
        stmt = delete(self.model).where(self._membership(target_id, user_id))
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return bool(result.rowcount)

    def count_for(self, db: Session, *, target_id: int) -> int:
        """Number of users who liked the target."""
        stmt = select(func.count(self.model.id)).where(self.target_column == target_id)
        return db.scalar(stmt) or 0

    def liked_target_ids(self, db: Session, *, user_id: int, target_ids: Iterable[int]) -> Set[int]:
        """Subset of `target_ids` the user has liked."""
        ids = list(target_ids)
        if not ids:
            return set()
        stmt = select(self.target_column).where(
            and_(self.model.user_id == user_id, self.target_column.in_(ids))
        )
        return set(db.scalars(stmt).all())


# Singleton instances
crud_post_like = CRUDLike(PostLike, "post_id")
crud_comment_like = CRUDLike(CommentLike, "comment_id")
