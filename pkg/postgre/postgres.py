from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from pkg.logger.logger import Logger
from .interface import IDatabase
from .type import PostgresConfig
from .constant import *


class PostgresDatabase(IDatabase):
    """PostgreSQL database manager with async support.

    Uses SQLAlchemy async with the asyncpg driver. Sessions are short-lived:
    every repository call opens one, commits and closes it.
    """

    def __init__(self, config: PostgresConfig, logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger
        self.engine = None
        self.session_factory = None
        self._initialize_engine()

    def _initialize_engine(self) -> None:
        engine_kwargs = {
            "echo": self.config.echo,
            "pool_pre_ping": self.config.pool_pre_ping,
            "pool_recycle": self.config.pool_recycle,
        }

        # NullPool in echo (debug) mode
        if self.config.echo:
            engine_kwargs["poolclass"] = NullPool
        else:
            engine_kwargs["pool_size"] = self.config.pool_size
            engine_kwargs["max_overflow"] = self.config.max_overflow

        if self.config.schema != DEFAULT_SCHEMA:
            engine_kwargs["connect_args"] = {
                "server_settings": {
                    "search_path": f"{self.config.schema},{DEFAULT_SCHEMA}"
                }
            }

        try:
            self.engine = create_async_engine(self.config.async_url, **engine_kwargs)
            self.session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )
        except Exception as e:
            if self.logger:
                self.logger.error(
                    f"pkg.postgre.postgres._initialize_engine: {e}"
                )
            raise

        if self.logger:
            self.logger.info(
                f"PostgreSQL engine initialized (schema={self.config.schema})"
            )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async database session with automatic cleanup.

        Raises:
            RuntimeError: If database not initialized
        """
        if not self.session_factory:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.get_session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            if self.logger:
                self.logger.error(f"pkg.postgre.postgres.health_check: {e}")
            return False

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            if self.logger:
                self.logger.info("PostgreSQL engine closed")


__all__ = [
    "PostgresDatabase",
]
