from typing import List

from internal.model import Comment
from internal.model.constant import COMMENT_STATUS_APPROVED
from utils.uuid_utils import parse_uuid
from ..repository.option import ListOptions
from ..repository.errors import RepositoryError


async def get_comments_by_post(self, post_id: str) -> List[Comment]:
    """Approved comments of a post, oldest first."""
    parsed = parse_uuid(post_id)
    if parsed is None:
        self.logger.warning(
            f"internal.comment.usecase.read.get_comments_by_post: invalid post id {post_id!r}"
        )
        return []

    try:
        return await self.repository.list(
            ListOptions(post_id=parsed, status=COMMENT_STATUS_APPROVED)
        )
    except RepositoryError as e:
        self.logger.error(f"internal.comment.usecase.read.get_comments_by_post: {e}")
        return []
