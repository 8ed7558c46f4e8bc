from typing import List, Optional, Protocol, runtime_checkable

from internal.model import Post
from .type import (
    AdminPostSummary,
    AdminPostView,
    CreatePostInput,
    PostView,
    UpdatePostInput,
)


@runtime_checkable
class IPostUseCase(Protocol):
    async def get_all_posts(self) -> List[PostView]:
        ...

    async def get_post_by_slug(self, slug: str) -> Optional[PostView]:
        ...

    async def get_posts_by_category(self, category_slug: str) -> List[PostView]:
        ...

    async def get_recent_posts(self, limit: Optional[int] = None) -> List[PostView]:
        ...

    async def get_featured_post(self) -> Optional[PostView]:
        ...

    async def get_admin_posts(self) -> List[AdminPostSummary]:
        ...

    async def get_admin_post_by_id(self, post_id: str) -> Optional[AdminPostView]:
        ...

    async def create_post(self, input: CreatePostInput) -> Post:
        ...

    async def update_post(self, post_id: str, input: UpdatePostInput) -> Post:
        ...

    async def delete_post(self, post_id: str) -> bool:
        ...


__all__ = ["IPostUseCase"]
