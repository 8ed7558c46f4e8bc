from typing import Any, List, Mapping, Union

from pkg.logger.logger import Logger
from internal.model import Comment

from ..repository.interface import ICommentRepository
from ..interface import ICommentUseCase
from ..type import CreateCommentInput
from .read import get_comments_by_post as _get_comments_by_post
from .create import create_comment as _create_comment
from .moderate import moderate_comment as _moderate_comment


class CommentUseCase(ICommentUseCase):
    def __init__(self, repository: ICommentRepository, logger: Logger) -> None:
        self.repository = repository
        self.logger = logger

    async def get_comments_by_post(self, post_id: str) -> List[Comment]:
        return await _get_comments_by_post(self, post_id)

    async def create_comment(
        self, data: Union[CreateCommentInput, Mapping[str, Any]]
    ) -> Comment:
        return await _create_comment(self, data)

    async def moderate_comment(self, comment_id: str, status: str) -> Comment:
        return await _moderate_comment(self, comment_id, status)
