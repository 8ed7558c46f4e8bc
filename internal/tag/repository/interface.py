from typing import Protocol, runtime_checkable

from internal.model import Tag
from .option import GetOrCreateOptions, ReplacePostTagsOptions


@runtime_checkable
class ITagRepository(Protocol):
    async def get_or_create(self, opt: GetOrCreateOptions) -> Tag: ...
    async def replace_post_tags(self, opt: ReplacePostTagsOptions) -> int: ...


__all__ = ["ITagRepository"]
