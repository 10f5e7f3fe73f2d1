"""CRUD operations for Post."""

from typing import Dict, List, Optional, Set
from sqlalchemy import select, func, desc
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.comment import Comment
from app.models.post import Post
from app.schemas.post import PostCreate, PostUpdate


class CRUDPost(CRUDBase[Post, PostCreate, PostUpdate]):
    """CRUD operations for Post."""

    def create_post(
        self,
        db: Session,
        *,
        author_id: int,
        post_in: PostCreate,
        image_path: Optional[str] = None
    ) -> Post:
        """Create a new post."""
        post = Post(
            author_id=author_id,
            title=post_in.title,
            body=post_in.body,
            category=post_in.category,
            image_path=image_path,
        )
        return self.save(db, post)

    def update_post(
        self,
        db: Session,
        *,
        post: Post,
        post_in: PostUpdate,
        image_path: Optional[str] = None
    ) -> Post:
        """Update text fields and, when given, the image path.

        Author and creation time are never touched.
        """
        post.title = post_in.title
        post.body = post_in.body
        post.category = post_in.category
        if image_path:
            post.image_path = image_path
        return self.save(db, post)

    def get_by_id(self, db: Session, *, post_id: int) -> Optional[Post]:
        """Get post by ID."""
        stmt = select(Post).where(Post.id == post_id)
        return db.scalars(stmt).first()

    def get_by_category(
        self,
        db: Session,
        *,
        category: str,
        skip: int = 0,
        limit: int = 100
    ) -> List[Post]:
        """Posts of one category, newest first."""
        stmt = (
            select(Post)
            .where(Post.category == category)
            .order_by(desc(Post.created_at), desc(Post.id))
            .offset(skip)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def get_all(self, db: Session, *, skip: int = 0, limit: int = 500) -> List[Post]:
        """All posts, newest first."""
        stmt = (
            select(Post)
            .order_by(desc(Post.created_at), desc(Post.id))
            .offset(skip)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def count_by_category(self, db: Session) -> Dict[str, int]:
        """Number of posts per category name."""
        stmt = select(Post.category, func.count(Post.id)).group_by(Post.category)
        return {category: count for category, count in db.execute(stmt).all()}

    def count_in_category(self, db: Session, *, category: str) -> int:
        stmt = select(func.count(Post.id)).where(Post.category == category)
        return db.scalar(stmt) or 0

    def count_comments(self, db: Session, *, post_id: int) -> int:
        stmt = select(func.count(Comment.id)).where(Comment.post_id == post_id)
        return db.scalar(stmt) or 0

    def get_image_paths(self, db: Session) -> Set[str]:
        """Every image path currently referenced by a post."""
        stmt = select(Post.image_path).where(Post.image_path.is_not(None))
        return {path for path in db.scalars(stmt).all() if path}

    def get_with_images(self, db: Session) -> List[Post]:
        stmt = select(Post).where(Post.image_path.is_not(None))
        return list(db.scalars(stmt).all())

    def clear_image(self, db: Session, *, post: Post) -> Post:
        post.image_path = None
        return self.save(db, post)

    def delete_post(self, db: Session, *, post: Post) -> Post:
        """Delete a post together with its comments and likes."""
        return self.remove(db, db_obj=post)


# Singleton instance
crud_post = CRUDPost(Post)
