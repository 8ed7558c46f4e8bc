from typing import List, Optional

from pkg.auth.interface import IAuthProvider
from pkg.logger.logger import Logger
from internal.model import Post
from internal.profile.repository import IProfileRepository
from internal.category.repository import ICategoryRepository
from internal.tag.repository import ITagRepository

from ..repository.interface import IPostRepository
from ..interface import IPostUseCase
from ..type import (
    AdminPostSummary,
    AdminPostView,
    CreatePostInput,
    PostUseCaseConfig,
    PostView,
    UpdatePostInput,
)
from .read import (
    get_all_posts as _get_all_posts,
    get_post_by_slug as _get_post_by_slug,
    get_posts_by_category as _get_posts_by_category,
    get_recent_posts as _get_recent_posts,
    get_featured_post as _get_featured_post,
    get_admin_posts as _get_admin_posts,
    get_admin_post_by_id as _get_admin_post_by_id,
)
from .create import create_post as _create_post
from .update import update_post as _update_post
from .delete import delete_post as _delete_post


class PostUseCase(IPostUseCase):
    def __init__(
        self,
        repository: IPostRepository,
        profile_repository: IProfileRepository,
        category_repository: ICategoryRepository,
        tag_repository: ITagRepository,
        auth: IAuthProvider,
        logger: Logger,
        config: Optional[PostUseCaseConfig] = None,
    ) -> None:
        self.repository = repository
        self.profile_repository = profile_repository
        self.category_repository = category_repository
        self.tag_repository = tag_repository
        self.auth = auth
        self.logger = logger
        self.config = config or PostUseCaseConfig()

    async def get_all_posts(self) -> List[PostView]:
        return await _get_all_posts(self)

    async def get_post_by_slug(self, slug: str) -> Optional[PostView]:
        return await _get_post_by_slug(self, slug)

    async def get_posts_by_category(self, category_slug: str) -> List[PostView]:
        return await _get_posts_by_category(self, category_slug)

    async def get_recent_posts(self, limit: Optional[int] = None) -> List[PostView]:
        return await _get_recent_posts(self, limit)

    async def get_featured_post(self) -> Optional[PostView]:
        return await _get_featured_post(self)

    async def get_admin_posts(self) -> List[AdminPostSummary]:
        return await _get_admin_posts(self)

    async def get_admin_post_by_id(self, post_id: str) -> Optional[AdminPostView]:
        return await _get_admin_post_by_id(self, post_id)

    async def create_post(self, input: CreatePostInput) -> Post:
        return await _create_post(self, input)

    async def update_post(self, post_id: str, input: UpdatePostInput) -> Post:
        return await _update_post(self, post_id, input)

    async def delete_post(self, post_id: str) -> bool:
        return await _delete_post(self, post_id)
