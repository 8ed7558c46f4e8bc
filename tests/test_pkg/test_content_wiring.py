"""Unit tests for building the content use cases from configuration."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config.config import Config
from pkg.auth.auth import ContextAuthProvider
from internal.content import Dependencies, NewContentServices, init_dependencies
from internal.post import IPostUseCase
from internal.category import ICategoryUseCase
from internal.comment import ICommentUseCase


class TestInitDependencies:
    @pytest.mark.asyncio
    @patch("internal.content.new.PostgresDatabase")
    async def test_builds_collaborators(self, database_cls):
        database_cls.return_value.health_check = AsyncMock(return_value=True)

        deps = await init_dependencies(Config())

        assert deps.db is database_cls.return_value
        assert isinstance(deps.auth, ContextAuthProvider)
        pg_config = database_cls.call_args.args[0]
        assert pg_config.schema == "blog"

    @pytest.mark.asyncio
    @patch("internal.content.new.PostgresDatabase")
    async def test_failed_health_check(self, database_cls):
        database_cls.return_value.health_check = AsyncMock(return_value=False)
        database_cls.return_value.close = AsyncMock()

        with pytest.raises(RuntimeError, match="health check"):
            await init_dependencies(Config())

        database_cls.return_value.close.assert_awaited_once()


class TestNewContentServices:
    def test_wires_use_cases(self):
        config = Config()
        config.content.recent_posts_limit = 6
        deps = Dependencies(
            logger=MagicMock(), db=MagicMock(), auth=ContextAuthProvider(), config=config
        )

        services = NewContentServices(deps)

        assert isinstance(services.posts, IPostUseCase)
        assert isinstance(services.categories, ICategoryUseCase)
        assert isinstance(services.comments, ICommentUseCase)
        assert services.posts.config.recent_posts_limit == 6
        assert services.posts.auth is deps.auth
