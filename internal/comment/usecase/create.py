from typing import Any, Mapping, Union

from internal.model import Comment
from ..errors import ErrInvalidInput
from ..repository.option import CreateOptions
from ..repository.errors import RepositoryError
from ..type import CreateCommentInput


async def create_comment(
    self, data: Union[CreateCommentInput, Mapping[str, Any]]
) -> Comment:
    try:
        return await self.repository.create(CreateOptions(data=data))
    except ValueError as e:
        self.logger.error(f"internal.comment.usecase.create.create_comment: {e}")
        raise ErrInvalidInput(str(e)) from e
    except RepositoryError as e:
        self.logger.error(f"internal.comment.usecase.create.create_comment: {e}")
        raise
