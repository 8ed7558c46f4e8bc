from typing import Final

UNKNOWN_AUTHOR: Final[str] = "Unknown Author"
ANONYMOUS_AUTHOR: Final[str] = "Anonymous"
UNCATEGORIZED_NAME: Final[str] = "Uncategorized"
UNCATEGORIZED_SLUG: Final[str] = "uncategorized"

DEFAULT_PLACEHOLDER_IMAGE_URL: Final[str] = (
    "https://images.pexels.com/photos/274506/pexels-photo-274506.jpeg"
)
DEFAULT_WORDS_PER_MINUTE: Final[int] = 200
DEFAULT_RECENT_POSTS_LIMIT: Final[int] = 4

CATEGORY_DESCRIPTION_TEMPLATE: Final[str] = "Posts about {slug}"
