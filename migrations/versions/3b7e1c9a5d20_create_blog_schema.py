"""create_blog_schema

Revision ID: 3b7e1c9a5d20
Revises:
Create Date: 2026-10-19 09:12:40.518302

Creates profiles, categories, tags, posts, post_tags and comments.
Deleting a post removes its post_tags and comments rows through
ON DELETE CASCADE; deleting a category leaves its posts uncategorized.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3b7e1c9a5d20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
    )


def upgrade() -> None:
    op.create_table(
        "profiles",
        _id_column(),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        _created_at_column(),
        sa.UniqueConstraint("user_id", name="uq_profiles_user_id"),
    )

    op.create_table(
        "categories",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at_column(),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
    )

    op.create_table(
        "tags",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        _created_at_column(),
        sa.UniqueConstraint("slug", name="uq_tags_slug"),
    )

    op.create_table(
        "posts",
        _id_column(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("slug", sa.String(500), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("featured_image_url", sa.Text(), nullable=True),
        sa.Column(
            "author_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("profiles.id"),
            nullable=False,
        ),
        sa.Column(
            "category_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        _created_at_column(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
        sa.Column("meta_title", sa.String(255), nullable=True),
        sa.Column("meta_description", sa.Text(), nullable=True),
        sa.Column(
            "meta_keywords",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default="{}",
        ),
        sa.UniqueConstraint("slug", name="uq_posts_slug"),
        sa.CheckConstraint(
            "status IN ('draft', 'published', 'scheduled')", name="ck_posts_status"
        ),
    )
    op.create_index(
        "idx_posts_status_published", "posts", ["status", "published_at"]
    )
    op.create_index("idx_posts_created", "posts", ["created_at"])
    op.create_index("idx_posts_category", "posts", ["category_id"])

    op.create_table(
        "post_tags",
        sa.Column(
            "post_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "tag_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("idx_post_tags_tag", "post_tags", ["tag_id"])

    op.create_table(
        "comments",
        _id_column(),
        sa.Column(
            "post_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("author_email", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        _created_at_column(),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')", name="ck_comments_status"
        ),
    )
    op.create_index(
        "idx_comments_post_status", "comments", ["post_id", "status", "created_at"]
    )


def downgrade() -> None:
    op.drop_index("idx_comments_post_status", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_post_tags_tag", table_name="post_tags")
    op.drop_table("post_tags")
    op.drop_index("idx_posts_category", table_name="posts")
    op.drop_index("idx_posts_created", table_name="posts")
    op.drop_index("idx_posts_status_published", table_name="posts")
    op.drop_table("posts")
    op.drop_table("tags")
    op.drop_table("categories")
    op.drop_table("profiles")
