from typing import List, Optional, Protocol, runtime_checkable

from internal.model import Category
from .type import CategoryView


@runtime_checkable
class ICategoryUseCase(Protocol):
    async def list_categories(self) -> List[CategoryView]:
        ...

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        ...


__all__ = ["ICategoryUseCase"]
