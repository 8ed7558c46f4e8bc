from typing import Optional

from pkg.logger.logger import Logger
from ..repository.interface import ICategoryRepository
from ..interface import ICategoryUseCase
from ..type import CategoryUseCaseConfig
from .usecase import CategoryUseCase


def New(
    repository: ICategoryRepository,
    logger: Logger,
    config: Optional[CategoryUseCaseConfig] = None,
) -> ICategoryUseCase:
    return CategoryUseCase(repository=repository, logger=logger, config=config)


__all__ = ["New"]
