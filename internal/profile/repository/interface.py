from typing import Protocol, runtime_checkable

from internal.model import Profile
from .option import GetOrCreateOptions


@runtime_checkable
class IProfileRepository(Protocol):
    async def get_or_create(self, opt: GetOrCreateOptions) -> Profile: ...


__all__ = ["IProfileRepository"]
