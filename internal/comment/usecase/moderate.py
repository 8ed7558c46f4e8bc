from internal.model import Comment
from internal.model.constant import COMMENT_STATUSES
from utils.uuid_utils import parse_uuid
from ..errors import ErrCommentNotFound, ErrInvalidInput
from ..repository.option import UpdateStatusOptions
from ..repository.errors import RepositoryError


async def moderate_comment(self, comment_id: str, status: str) -> Comment:
    """Move a comment between pending, approved and rejected."""
    if status not in COMMENT_STATUSES:
        raise ErrInvalidInput(
            f"invalid comment status {status!r}, expected one of {list(COMMENT_STATUSES)}"
        )

    parsed = parse_uuid(comment_id)
    if parsed is None:
        raise ErrInvalidInput(f"invalid comment id {comment_id!r}")

    try:
        comment = await self.repository.update_status(
            UpdateStatusOptions(id=parsed, status=status)
        )
    except RepositoryError as e:
        self.logger.error(f"internal.comment.usecase.moderate.moderate_comment: {e}")
        raise

    if comment is None:
        raise ErrCommentNotFound(f"comment {comment_id} not found")

    self.logger.info(f"Comment {comment_id} moved to {status}")
    return comment
