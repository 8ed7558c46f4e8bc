"""Interface for the authentication capability."""

from typing import Optional, Protocol, runtime_checkable

from .type import AuthUser


@runtime_checkable
class IAuthProvider(Protocol):
    async def get_current_user(self) -> Optional[AuthUser]:
        """Return the identity of the caller, or None when unauthenticated."""
        ...


__all__ = ["IAuthProvider"]
