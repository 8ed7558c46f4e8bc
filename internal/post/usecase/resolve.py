"""Foreign-key resolution steps of the post write path.

Profile resolution is fatal: a post cannot exist without an author.
Category and tag resolution are best-effort: failures are logged and the
post is written (or kept) without them.
"""

from typing import Iterable, List, Optional
import uuid

from pkg.auth.type import AuthUser
from internal.model import Profile
from internal.profile.repository import (
    GetOrCreateOptions as ProfileGetOrCreateOptions,
    RepositoryError as ProfileRepositoryError,
)
from internal.category.repository import (
    GetOrCreateOptions as CategoryGetOrCreateOptions,
    RepositoryError as CategoryRepositoryError,
)
from internal.tag.repository import (
    GetOrCreateOptions as TagGetOrCreateOptions,
    ReplacePostTagsOptions,
    RepositoryError as TagRepositoryError,
)
from utils.slug import generate_slug
from .helpers import category_defaults, default_display_name, distinct_tags


async def resolve_profile(self, user: AuthUser) -> Profile:
    try:
        return await self.profile_repository.get_or_create(
            ProfileGetOrCreateOptions(
                user_id=user.id,
                display_name=default_display_name(user.email),
            )
        )
    except ProfileRepositoryError as e:
        self.logger.error(f"internal.post.usecase.resolve.resolve_profile: {e}")
        raise


async def resolve_category_id(self, slug: Optional[str]) -> Optional[uuid.UUID]:
    slug = generate_slug(slug or "")
    if not slug:
        return None

    name, description = category_defaults(slug)
    try:
        category = await self.category_repository.get_or_create(
            CategoryGetOrCreateOptions(slug=slug, name=name, description=description)
        )
    except CategoryRepositoryError as e:
        self.logger.error(
            f"internal.post.usecase.resolve.resolve_category_id: category {slug!r}: {e}"
        )
        return None

    return category.id


async def resolve_tag_ids(self, names: Iterable[str]) -> List[uuid.UUID]:
    tag_ids: List[uuid.UUID] = []
    for slug, name in distinct_tags(names):
        try:
            tag = await self.tag_repository.get_or_create(
                TagGetOrCreateOptions(slug=slug, name=name)
            )
        except TagRepositoryError as e:
            self.logger.error(
                f"internal.post.usecase.resolve.resolve_tag_ids: tag {slug!r}: {e}"
            )
            continue
        tag_ids.append(tag.id)
    return tag_ids


async def replace_tags(self, post_id: uuid.UUID, names: Iterable[str]) -> None:
    """Make the post's associations exactly the resolvable tags in ``names``."""
    tag_ids = await resolve_tag_ids(self, names)
    try:
        await self.tag_repository.replace_post_tags(
            ReplacePostTagsOptions(post_id=post_id, tag_ids=tag_ids)
        )
    except TagRepositoryError as e:
        self.logger.error(
            f"internal.post.usecase.resolve.replace_tags: post {post_id}: {e}"
        )
