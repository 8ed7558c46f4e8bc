from internal.model import Post
from ..errors import ErrNotAuthenticated
from ..type import CreatePostInput
from ..repository.option import CreateOptions
from ..repository.errors import RepositoryError
from .helpers import build_create_row, utc_now, validate_input
from .resolve import replace_tags, resolve_category_id, resolve_profile


async def create_post(self, input: CreatePostInput) -> Post:
    user = await self.auth.get_current_user()
    if user is None:
        raise ErrNotAuthenticated("user not authenticated")

    validate_input(input)

    profile = await resolve_profile(self, user)
    category_id = await resolve_category_id(self, input.category)

    try:
        post = await self.repository.create(
            CreateOptions(
                data=build_create_row(input, profile.id, category_id, utc_now())
            )
        )
    except RepositoryError as e:
        self.logger.error(f"internal.post.usecase.create.create_post: {e}")
        raise

    if input.tags:
        await replace_tags(self, post.id, input.tags)

    self.logger.info(f"Post {post.id} created by user {user.id}")
    return post
