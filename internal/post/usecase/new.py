from typing import Optional

from pkg.auth.interface import IAuthProvider
from pkg.logger.logger import Logger
from internal.profile.repository import IProfileRepository
from internal.category.repository import ICategoryRepository
from internal.tag.repository import ITagRepository
from ..repository.interface import IPostRepository
from ..interface import IPostUseCase
from ..type import PostUseCaseConfig
from .usecase import PostUseCase


def New(
    repository: IPostRepository,
    profile_repository: IProfileRepository,
    category_repository: ICategoryRepository,
    tag_repository: ITagRepository,
    auth: IAuthProvider,
    logger: Logger,
    config: Optional[PostUseCaseConfig] = None,
) -> IPostUseCase:
    return PostUseCase(
        repository=repository,
        profile_repository=profile_repository,
        category_repository=category_repository,
        tag_repository=tag_repository,
        auth=auth,
        logger=logger,
        config=config,
    )


__all__ = ["New"]
