from typing import List, Optional, Protocol, runtime_checkable

from internal.model import Category
from .option import GetOrCreateOptions, ListOptions


@runtime_checkable
class ICategoryRepository(Protocol):
    async def list(self, opt: ListOptions) -> List[Category]: ...
    async def get_by_slug(self, slug: str) -> Optional[Category]: ...
    async def get_or_create(self, opt: GetOrCreateOptions) -> Category: ...


__all__ = ["ICategoryRepository"]
