from typing import List, Optional, Protocol, runtime_checkable

from internal.model import Comment
from .option import CreateOptions, ListOptions, UpdateStatusOptions


@runtime_checkable
class ICommentRepository(Protocol):
    async def create(self, opt: CreateOptions) -> Comment: ...
    async def list(self, opt: ListOptions) -> List[Comment]: ...
    async def update_status(self, opt: UpdateStatusOptions) -> Optional[Comment]: ...


__all__ = ["ICommentRepository"]
