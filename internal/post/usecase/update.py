from internal.model import Post
from utils.uuid_utils import parse_uuid
from ..errors import ErrInvalidInput, ErrPostNotFound
from ..type import UpdatePostInput
from ..repository.option import UpdateOptions
from ..repository.errors import RepositoryError
from .helpers import build_update_row, utc_now, validate_input
from .resolve import replace_tags, resolve_category_id


async def update_post(self, post_id: str, input: UpdatePostInput) -> Post:
    parsed = parse_uuid(post_id)
    if parsed is None:
        raise ErrInvalidInput(f"invalid post id {post_id!r}")

    validate_input(input)

    category_id = await resolve_category_id(self, input.category)

    try:
        post = await self.repository.update(
            UpdateOptions(id=parsed, data=build_update_row(input, category_id, utc_now()))
        )
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.update.update_post: {e}")
        raise

    if post is None:
        raise ErrPostNotFound(f"post {post_id} not found")

    if input.tags is not None:
        await replace_tags(self, parsed, input.tags)

    return post
