from typing import Any, List, Mapping, Protocol, Union, runtime_checkable

from internal.model import Comment
from .type import CreateCommentInput


@runtime_checkable
class ICommentUseCase(Protocol):
    async def get_comments_by_post(self, post_id: str) -> List[Comment]:
        ...

    async def create_comment(
        self, data: Union[CreateCommentInput, Mapping[str, Any]]
    ) -> Comment:
        ...

    async def moderate_comment(self, comment_id: str, status: str) -> Comment:
        ...


__all__ = ["ICommentUseCase"]
