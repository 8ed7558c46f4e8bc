from typing import List, Optional

from pkg.logger.logger import Logger
from internal.model import Category

from ..repository.interface import ICategoryRepository
from ..interface import ICategoryUseCase
from ..type import CategoryUseCaseConfig, CategoryView
from .read import (
    list_categories as _list_categories,
    get_category_by_slug as _get_category_by_slug,
)


class CategoryUseCase(ICategoryUseCase):
    def __init__(
        self,
        repository: ICategoryRepository,
        logger: Logger,
        config: Optional[CategoryUseCaseConfig] = None,
    ) -> None:
        self.repository = repository
        self.logger = logger
        self.config = config or CategoryUseCaseConfig()

    async def list_categories(self) -> List[CategoryView]:
        return await _list_categories(self)

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return await _get_category_by_slug(self, slug)
