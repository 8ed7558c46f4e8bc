from typing import Optional

from pkg.auth.auth import ContextAuthProvider
from pkg.auth.interface import IAuthProvider
from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from config.config import Config
from internal.model.constant import LOGGER_ENABLE_CONSOLE, LOGGER_SERVICE_NAME
from internal.profile import NewProfileRepository
from internal.tag import NewTagRepository
from internal.category import (
    CategoryUseCaseConfig,
    NewCategoryRepository,
    NewCategoryUseCase,
)
from internal.comment import NewCommentRepository, NewCommentUseCase
from internal.post import NewPostRepository, NewPostUseCase, PostUseCaseConfig
from .type import ContentServices, Dependencies


async def init_dependencies(
    config: Config,
    auth: Optional[IAuthProvider] = None,
    check_health: bool = True,
) -> Dependencies:
    """Initialize the logger, database and auth collaborators.

    Args:
        config: Application configuration
        auth: Identity provider; defaults to a context-bound provider
        check_health: Verify the database connection before returning

    Raises:
        RuntimeError: If the database health check fails
    """
    logger = Logger(
        LoggerConfig(
            level=config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=config.logging.colorize,
            service_name=LOGGER_SERVICE_NAME,
        )
    )
    logger.info("Logger initialized")

    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            schema=config.database.schema,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
            echo=config.database.echo,
        ),
        logger=logger,
    )
    if check_health and not await db.health_check():
        await db.close()
        raise RuntimeError("PostgreSQL health check failed")
    logger.info("PostgreSQL connection verified")

    return Dependencies(
        logger=logger,
        db=db,
        auth=auth or ContextAuthProvider(),
        config=config,
    )


def New(deps: Dependencies) -> ContentServices:
    """Build the post, category and comment use cases over one database."""
    logger = deps.logger
    content = deps.config.content

    profile_repository = NewProfileRepository(db=deps.db, logger=logger)
    tag_repository = NewTagRepository(db=deps.db, logger=logger)
    category_repository = NewCategoryRepository(db=deps.db, logger=logger)
    comment_repository = NewCommentRepository(db=deps.db, logger=logger)
    post_repository = NewPostRepository(db=deps.db, logger=logger)

    services = ContentServices(
        posts=NewPostUseCase(
            repository=post_repository,
            profile_repository=profile_repository,
            category_repository=category_repository,
            tag_repository=tag_repository,
            auth=deps.auth,
            logger=logger,
            config=PostUseCaseConfig(
                placeholder_image_url=content.placeholder_image_url,
                words_per_minute=content.words_per_minute,
                recent_posts_limit=content.recent_posts_limit,
            ),
        ),
        categories=NewCategoryUseCase(
            repository=category_repository,
            logger=logger,
            config=CategoryUseCaseConfig(default_color=content.default_category_color),
        ),
        comments=NewCommentUseCase(repository=comment_repository, logger=logger),
    )
    logger.info("Content use cases initialized")
    return services


async def close_dependencies(deps: Dependencies) -> None:
    await deps.db.close()


__all__ = ["init_dependencies", "New", "close_dependencies"]
