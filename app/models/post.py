"""Post model for the campus forum."""

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..database import Base


class Post(Base):
    """Forum post: title, body, category and an optional image."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Post Content
    title = Column(String(500), nullable=False)
    body = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    image_path = Column(String(500), nullable=True)  # /uploads/<file>

    # Timestamps
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    # Constraints & Indexes
    __table_args__ = (
        # Index untuk query posts by category
        Index('idx_post_category_created', 'category', 'created_at'),
        # Index untuk query posts by author
        Index('idx_post_author_created', 'author_id', 'created_at'),
    )

    # Relationships
    author = relationship("User", back_populates="posts", foreign_keys=[author_id])
    likes = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan"
    )
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="[Comment.created_at.asc(), Comment.id.asc()]"
    )
