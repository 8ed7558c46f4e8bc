from typing import List, Optional

from internal.model import Category
from ..type import CategoryView
from ..repository.option import ListOptions
from ..repository.errors import RepositoryError
from .helpers import to_category_view


async def list_categories(self) -> List[CategoryView]:
    try:
        categories = await self.repository.list(ListOptions())
    except RepositoryError as e:
        self.logger.error(f"internal.category.usecase.read.list_categories: {e}")
        return []

    return [to_category_view(c, self.config.default_color) for c in categories]


async def get_category_by_slug(self, slug: str) -> Optional[Category]:
    try:
        return await self.repository.get_by_slug(slug)
    except RepositoryError as e:
        self.logger.error(f"internal.category.usecase.read.get_category_by_slug: {e}")
        return None
