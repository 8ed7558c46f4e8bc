"""Interface for the content store."""

from typing import AsyncContextManager, Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession


@runtime_checkable
class IDatabase(Protocol):
    """Protocol for database operations.

    Each call to get_session() hands out an independent session, so
    implementations are safe to share between concurrent requests.
    """

    def get_session(self) -> AsyncContextManager[AsyncSession]:
        """Open a session that is closed (and rolled back on error) on exit."""
        ...

    async def health_check(self) -> bool: ...

    async def close(self) -> None: ...


__all__ = ["IDatabase"]
