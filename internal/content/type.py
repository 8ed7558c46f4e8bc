from dataclasses import dataclass

from pkg.auth.interface import IAuthProvider
from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from config.config import Config
from internal.post import IPostUseCase
from internal.category import ICategoryUseCase
from internal.comment import ICommentUseCase


@dataclass
class Dependencies:
    """Dependencies container for the content repository.

    Attributes:
        logger: Logger instance for structured logging
        db: PostgreSQL database instance
        auth: Caller identity provider
        config: Application configuration
    """

    logger: Logger
    db: PostgresDatabase
    auth: IAuthProvider
    config: Config


@dataclass
class ContentServices:
    posts: IPostUseCase
    categories: ICategoryUseCase
    comments: ICommentUseCase


__all__ = ["Dependencies", "ContentServices"]
