from utils.uuid_utils import parse_uuid
from ..errors import ErrInvalidInput
from ..repository.option import DeleteOptions
from ..repository.errors import RepositoryError


async def delete_post(self, post_id: str) -> bool:
    """Delete a post; its tag links and comments go with it via ON DELETE CASCADE.

    Returns False when no post had that id.
    """
    parsed = parse_uuid(post_id)
    if parsed is None:
        raise ErrInvalidInput(f"invalid post id {post_id!r}")

    try:
        deleted = await self.repository.delete(DeleteOptions(id=parsed))
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.delete.delete_post: {e}")
        raise

    if not deleted:
        self.logger.warning(f"internal.post.usecase.delete.delete_post: post {post_id} not found")
    return deleted
