from typing import List, Optional, Protocol, runtime_checkable

from internal.model import Post
from .option import (
    CreateOptions,
    UpdateOptions,
    GetOneOptions,
    ListOptions,
    DeleteOptions,
)


@runtime_checkable
class IPostRepository(Protocol):
    async def create(self, opt: CreateOptions) -> Post: ...
    async def update(self, opt: UpdateOptions) -> Optional[Post]: ...
    async def get_one(self, opt: GetOneOptions) -> Optional[Post]: ...
    async def list(self, opt: ListOptions) -> List[Post]: ...
    async def delete(self, opt: DeleteOptions) -> bool: ...


__all__ = ["IPostRepository"]
