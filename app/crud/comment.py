"""CRUD operations for Comment."""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.comment import Comment
from app.models.post import Post
from app.schemas.comment import CommentCreate


class CRUDComment(CRUDBase[Comment, CommentCreate, CommentCreate]):
    """CRUD operations for Comment."""

    def create_comment(
        self,
        db: Session,
        *,
        post: Post,
        author_id: int,
        comment_in: CommentCreate
    ) -> Comment:
        """Create a comment and append it to the post's comment list."""
        comment = Comment(
            author_id=author_id,
            body=comment_in.body,
        )
        post.comments.append(comment)
        try:
            db.add(post)
            db.commit()
            db.refresh(comment)
        except Exception:
            db.rollback()
            raise
        return comment

    def get_by_post(
        self,
        db: Session,
        *,
        post_id: int,
        skip: int = 0,
        limit: int = 1000
    ) -> List[Comment]:
        """Comments of a post, oldest first."""
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def get_by_id(self, db: Session, *, comment_id: int) -> Optional[Comment]:
        """Get comment by ID."""
        stmt = select(Comment).where(Comment.id == comment_id)
        return db.scalars(stmt).first()

    def delete_comment(self, db: Session, *, comment: Comment) -> Comment:
        """Delete a comment and pull it from its post's comment list."""
        post = comment.post
        try:
            if post is not None and comment in post.comments:
                # delete-orphan cascade removes the row
                post.comments.remove(comment)
            else:
                db.delete(comment)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return comment


# Singleton instance
crud_comment = CRUDComment(Comment)
