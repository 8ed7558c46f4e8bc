from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, List, Optional

from .constant import (
    DEFAULT_PLACEHOLDER_IMAGE_URL,
    DEFAULT_RECENT_POSTS_LIMIT,
    DEFAULT_WORDS_PER_MINUTE,
)


@dataclass
class PostUseCaseConfig:
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE_URL
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
    recent_posts_limit: int = DEFAULT_RECENT_POSTS_LIMIT


@dataclass
class CreatePostInput:
    title: str
    content: str = ""
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None

    # Category slug; created on first use
    category: Optional[str] = None

    status: Optional[str] = None
    scheduled_at: Optional[datetime] = None

    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[List[str]] = None

    # Tag display names; slugs are derived
    tags: Optional[List[str]] = None


@dataclass
class UpdatePostInput:
    """Full replacement of a post.

    Every column is rewritten from these fields, so an omitted
    scheduled_at clears the schedule. tags=None leaves the associations
    alone while tags=[] removes them all.
    """

    title: str
    content: str = ""
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[List[str]] = None
    tags: Optional[List[str]] = None


@dataclass
class AuthorView:
    name: str
    bio: str = ""
    avatar: Optional[str] = None


@dataclass
class CategoryRef:
    name: str
    slug: str


@dataclass
class TagRef:
    name: str
    slug: str


@dataclass
class PostView:
    """Post as rendered on public pages.

    views and comments_count are not tracked and always read 0.
    """

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    featured_image_url: str
    author: AuthorView
    category: CategoryRef
    tags: List[TagRef] = field(default_factory=list)
    status: str = ""
    published_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    views: int = 0
    comments_count: int = 0
    reading_time: int = 0
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class AdminPostView:
    """Post as loaded into the editor: no display fallbacks on dates or image."""

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    featured_image_url: Optional[str]
    author: AuthorView
    category: CategoryRef
    tags: List[TagRef] = field(default_factory=list)
    status: str = ""
    published_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    reading_time: int = 0
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class AdminPostSummary:
    id: str
    title: str
    slug: str
    author: str
    status: str
    category: str
    tags: List[TagRef] = field(default_factory=list)
    publish_date: Optional[str] = None
    views: int = 0
    comments: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "PostUseCaseConfig",
    "CreatePostInput",
    "UpdatePostInput",
    "AuthorView",
    "CategoryRef",
    "TagRef",
    "PostView",
    "AdminPostView",
    "AdminPostSummary",
]
