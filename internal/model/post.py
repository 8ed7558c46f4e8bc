"""ORM model for the posts table.

Relationships are never lazy-loaded under asyncio; queries that need
author, category or tags attach the loader options themselves.
"""

from sqlalchemy import (
    Column,
    String,
    Text,
    DateTime,
    ForeignKey,
    CheckConstraint,
    Index,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base
from .category import Category
from .profile import Profile
from .tag import Tag


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'published', 'scheduled')", name="ck_posts_status"
        ),
        Index("idx_posts_status_published", "status", "published_at"),
        Index("idx_posts_created", "created_at"),
        Index("idx_posts_category", "category_id"),
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    title = Column(String(500), nullable=False)
    slug = Column(String(500), nullable=False, unique=True)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False, server_default="")
    featured_image_url = Column(Text, nullable=True)

    author_id = Column(
        UUID(as_uuid=True), ForeignKey("profiles.id"), nullable=False
    )
    category_id = Column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )

    status = Column(String(20), nullable=False, server_default="draft")
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    meta_title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    meta_keywords = Column(ARRAY(String), nullable=False, server_default="{}")

    author = relationship(Profile, lazy="raise")
    category = relationship(Category, lazy="raise")
    tags = relationship(
        Tag,
        secondary="post_tags",
        order_by=Tag.name,
        lazy="raise",
        viewonly=True,
    )


__all__ = ["Post"]
