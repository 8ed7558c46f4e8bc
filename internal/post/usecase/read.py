from typing import List, Optional

from internal.model.constant import POST_STATUS_PUBLISHED
from utils.uuid_utils import parse_uuid
from ..type import AdminPostSummary, AdminPostView, PostView
from ..repository.option import ORDER_BY_CREATED_AT, GetOneOptions, ListOptions
from ..repository.errors import RepositoryError
from .helpers import to_admin_summary, to_admin_view, to_post_view


async def _list_published(self, opt: ListOptions, caller: str) -> List[PostView]:
    opt.status = POST_STATUS_PUBLISHED
    try:
        posts = await self.repository.list(opt)
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.read.{caller}: {e}")
        return []

    return [to_post_view(p, self.config) for p in posts]


async def get_all_posts(self) -> List[PostView]:
    return await _list_published(self, ListOptions(), "get_all_posts")


async def get_posts_by_category(self, category_slug: str) -> List[PostView]:
    if not category_slug:
        return []
    return await _list_published(
        self, ListOptions(category_slug=category_slug), "get_posts_by_category"
    )


async def get_recent_posts(self, limit: Optional[int] = None) -> List[PostView]:
    if limit is None:
        limit = self.config.recent_posts_limit
    if limit <= 0:
        return []
    return await _list_published(self, ListOptions(limit=limit), "get_recent_posts")


async def get_featured_post(self) -> Optional[PostView]:
    """Most recently published post."""
    posts = await _list_published(self, ListOptions(limit=1), "get_featured_post")
    return posts[0] if posts else None


async def get_post_by_slug(self, slug: str) -> Optional[PostView]:
    if not slug:
        return None

    try:
        post = await self.repository.get_one(
            GetOneOptions(slug=slug, status=POST_STATUS_PUBLISHED)
        )
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.read.get_post_by_slug: {e}")
        return None

    return to_post_view(post, self.config) if post else None


async def get_admin_posts(self) -> List[AdminPostSummary]:
    try:
        posts = await self.repository.list(
            ListOptions(order_by=ORDER_BY_CREATED_AT, with_tags=False)
        )
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.read.get_admin_posts: {e}")
        return []

    return [to_admin_summary(p) for p in posts]


async def get_admin_post_by_id(self, post_id: str) -> Optional[AdminPostView]:
    parsed = parse_uuid(post_id)
    if parsed is None:
        self.logger.warning(
            f"internal.post.usecase.read.get_admin_post_by_id: invalid post id {post_id!r}"
        )
        return None

    try:
        post = await self.repository.get_one(GetOneOptions(id=parsed))
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.read.get_admin_post_by_id: {e}")
        return None

    return to_admin_view(post, self.config) if post else None
