from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
import uuid

from internal.model import Category, Post, Profile, Tag
from internal.model.constant import POST_STATUS_DRAFT, POST_STATUS_PUBLISHED, POST_STATUSES
from utils.slug import estimate_reading_time, generate_slug, humanize_slug
from ..constant import (
    ANONYMOUS_AUTHOR,
    CATEGORY_DESCRIPTION_TEMPLATE,
    UNCATEGORIZED_NAME,
    UNCATEGORIZED_SLUG,
    UNKNOWN_AUTHOR,
)
from ..errors import ErrInvalidInput
from ..type import (
    AdminPostSummary,
    AdminPostView,
    AuthorView,
    CategoryRef,
    CreatePostInput,
    PostUseCaseConfig,
    PostView,
    TagRef,
    UpdatePostInput,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# --- Display mapping ---------------------------------------------------------


def _author_view(profile: Optional[Profile]) -> AuthorView:
    if profile is None:
        return AuthorView(name=UNKNOWN_AUTHOR)
    return AuthorView(
        name=profile.display_name or UNKNOWN_AUTHOR,
        bio=profile.bio or "",
        avatar=profile.avatar_url,
    )


def _category_ref(category: Optional[Category]) -> CategoryRef:
    if category is None:
        return CategoryRef(name=UNCATEGORIZED_NAME, slug=UNCATEGORIZED_SLUG)
    return CategoryRef(
        name=category.name or UNCATEGORIZED_NAME,
        slug=category.slug or UNCATEGORIZED_SLUG,
    )


def _tag_refs(tags: Optional[Iterable[Tag]]) -> List[TagRef]:
    return [TagRef(name=t.name or "", slug=t.slug or "") for t in tags or []]


def to_post_view(post: Post, config: PostUseCaseConfig) -> PostView:
    return PostView(
        id=str(post.id),
        title=post.title,
        slug=post.slug,
        excerpt=post.excerpt or "",
        content=post.content or "",
        featured_image_url=post.featured_image_url or config.placeholder_image_url,
        author=_author_view(post.author),
        category=_category_ref(post.category),
        tags=_tag_refs(post.tags),
        status=post.status,
        published_at=post.published_at or post.created_at,
        scheduled_at=post.scheduled_at,
        updated_at=post.updated_at,
        reading_time=estimate_reading_time(post.content, config.words_per_minute),
        meta_title=post.meta_title,
        meta_description=post.meta_description,
    )


def to_admin_view(post: Post, config: PostUseCaseConfig) -> AdminPostView:
    return AdminPostView(
        id=str(post.id),
        title=post.title,
        slug=post.slug,
        excerpt=post.excerpt or "",
        content=post.content or "",
        featured_image_url=post.featured_image_url,
        author=_author_view(post.author),
        category=_category_ref(post.category),
        tags=_tag_refs(post.tags),
        status=post.status,
        published_at=post.published_at,
        scheduled_at=post.scheduled_at,
        updated_at=post.updated_at,
        reading_time=estimate_reading_time(post.content, config.words_per_minute),
        meta_title=post.meta_title,
        meta_description=post.meta_description,
        meta_keywords=list(post.meta_keywords or []),
    )


def publish_date(published_at: Optional[datetime]) -> Optional[str]:
    """Calendar date (UTC) of a publish timestamp, e.g. "2024-05-01"."""
    if published_at is None:
        return None
    if published_at.tzinfo is not None:
        published_at = published_at.astimezone(timezone.utc)
    return published_at.date().isoformat()


def to_admin_summary(post: Post) -> AdminPostSummary:
    # Tags are not loaded for the admin table
    author = post.author.display_name if post.author else None
    category = post.category.name if post.category else None
    return AdminPostSummary(
        id=str(post.id),
        title=post.title,
        slug=post.slug,
        author=author or UNKNOWN_AUTHOR,
        status=post.status,
        category=category or UNCATEGORIZED_NAME,
        publish_date=publish_date(post.published_at),
    )


# --- Write path --------------------------------------------------------------


def default_display_name(email: Optional[str]) -> str:
    local_part = (email or "").split("@")[0]
    return local_part or ANONYMOUS_AUTHOR


def category_defaults(slug: str) -> Tuple[str, str]:
    """Name and description of a category created on first reference."""
    return humanize_slug(slug), CATEGORY_DESCRIPTION_TEMPLATE.format(slug=slug)


def distinct_tags(names: Iterable[str]) -> List[Tuple[str, str]]:
    """(slug, name) pairs, one per distinct slug, first spelling wins."""
    seen: Dict[str, str] = {}
    for name in names:
        slug = generate_slug(name)
        if slug and slug not in seen:
            seen[slug] = name.strip()
    return list(seen.items())


def _validate_status(status: Optional[str]) -> str:
    status = status or POST_STATUS_DRAFT
    if status not in POST_STATUSES:
        raise ErrInvalidInput(
            f"invalid post status {status!r}, expected one of {list(POST_STATUSES)}"
        )
    return status


def _validate_title_and_slug(data: Union[CreatePostInput, UpdatePostInput]) -> str:
    if not data.title or not data.title.strip():
        raise ErrInvalidInput("title is required")
    source = data.slug or data.title
    slug = generate_slug(source)
    if not slug:
        raise ErrInvalidInput(f"cannot derive a slug from {source!r}")
    return slug


def build_create_row(
    data: CreatePostInput,
    author_id: uuid.UUID,
    category_id: Optional[uuid.UUID],
    now: datetime,
) -> Dict[str, Any]:
    status = _validate_status(data.status)
    return {
        "title": data.title,
        "slug": _validate_title_and_slug(data),
        "excerpt": data.excerpt,
        "content": data.content or "",
        "featured_image_url": data.featured_image,
        "author_id": author_id,
        "category_id": category_id,
        "status": status,
        "scheduled_at": data.scheduled_at,
        "published_at": now if status == POST_STATUS_PUBLISHED else None,
        "meta_title": data.meta_title,
        "meta_description": data.meta_description,
        "meta_keywords": list(data.meta_keywords or []),
    }


def build_update_row(
    data: UpdatePostInput,
    category_id: Optional[uuid.UUID],
    now: datetime,
) -> Dict[str, Any]:
    status = _validate_status(data.status)
    published_at = None
    if status == POST_STATUS_PUBLISHED:
        published_at = data.published_at or now
    return {
        "title": data.title,
        "slug": _validate_title_and_slug(data),
        "excerpt": data.excerpt,
        "content": data.content or "",
        "featured_image_url": data.featured_image,
        "category_id": category_id,
        "status": status,
        "scheduled_at": data.scheduled_at,
        "published_at": published_at,
        "meta_title": data.meta_title,
        "meta_description": data.meta_description,
        "meta_keywords": list(data.meta_keywords or []),
    }


def validate_input(data: Union[CreatePostInput, UpdatePostInput]) -> None:
    """Reject input the row builders would refuse, before any write happens."""
    _validate_status(data.status)
    _validate_title_and_slug(data)


__all__ = [
    "utc_now",
    "to_post_view",
    "to_admin_view",
    "to_admin_summary",
    "publish_date",
    "default_display_name",
    "category_defaults",
    "distinct_tags",
    "build_create_row",
    "build_update_row",
    "validate_input",
]
