"""Unit tests for PostgresConfig and PostgresDatabase."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig


class TestPostgresConfig:
    def test_sync_url_rewritten_to_asyncpg(self):
        config = PostgresConfig(database_url="postgresql://u:p@localhost:5432/blog")
        assert config.async_url == "postgresql+asyncpg://u:p@localhost:5432/blog"

    def test_postgres_scheme_rewritten(self):
        config = PostgresConfig(database_url="postgres://u:p@db/blog")
        assert config.async_url == "postgresql+asyncpg://u:p@db/blog"

    def test_async_url_kept(self):
        url = "postgresql+asyncpg://u:p@db/blog"
        assert PostgresConfig(database_url=url).async_url == url

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"database_url": ""},
            {"database_url": "mysql://u:p@db/blog"},
            {"database_url": "postgresql://db/blog", "pool_size": 0},
            {"database_url": "postgresql://db/blog", "max_overflow": -1},
            {"database_url": "postgresql://db/blog", "schema": " "},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            PostgresConfig(**kwargs)


class TestPostgresDatabase:
    @patch("pkg.postgre.postgres.create_async_engine")
    def test_schema_sets_search_path(self, create_engine):
        PostgresDatabase(PostgresConfig(database_url="postgresql://db/blog", schema="blog"))

        kwargs = create_engine.call_args.kwargs
        assert kwargs["connect_args"] == {
            "server_settings": {"search_path": "blog,public"}
        }
        assert kwargs["pool_size"] == 10

    @patch("pkg.postgre.postgres.create_async_engine")
    def test_public_schema_has_no_search_path(self, create_engine):
        PostgresDatabase(PostgresConfig(database_url="postgresql://db/blog"))

        assert "connect_args" not in create_engine.call_args.kwargs

    @pytest.mark.asyncio
    @patch("pkg.postgre.postgres.create_async_engine")
    async def test_session_rolls_back_on_error(self, create_engine):
        db = PostgresDatabase(PostgresConfig(database_url="postgresql://db/blog"))
        session = MagicMock()
        session.rollback = AsyncMock()
        factory_cm = MagicMock()
        factory_cm.__aenter__ = AsyncMock(return_value=session)
        factory_cm.__aexit__ = AsyncMock(return_value=False)
        db.session_factory = MagicMock(return_value=factory_cm)

        with pytest.raises(RuntimeError):
            async with db.get_session():
                raise RuntimeError("boom")

        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    @patch("pkg.postgre.postgres.create_async_engine")
    async def test_health_check_false_on_error(self, create_engine):
        logger = MagicMock()
        db = PostgresDatabase(
            PostgresConfig(database_url="postgresql://db/blog"), logger=logger
        )
        db.session_factory = MagicMock(side_effect=OSError("connection refused"))

        assert await db.health_check() is False
        logger.error.assert_called_once()
