from typing import Final, Tuple

# Logger configuration
LOGGER_SERVICE_NAME: Final[str] = "content-repository"
LOGGER_ENABLE_CONSOLE: Final[bool] = True

# Post lifecycle
POST_STATUS_DRAFT: Final[str] = "draft"
POST_STATUS_PUBLISHED: Final[str] = "published"
POST_STATUS_SCHEDULED: Final[str] = "scheduled"
POST_STATUSES: Final[Tuple[str, ...]] = (
    POST_STATUS_DRAFT,
    POST_STATUS_PUBLISHED,
    POST_STATUS_SCHEDULED,
)

# Comment moderation
COMMENT_STATUS_PENDING: Final[str] = "pending"
COMMENT_STATUS_APPROVED: Final[str] = "approved"
COMMENT_STATUS_REJECTED: Final[str] = "rejected"
COMMENT_STATUSES: Final[Tuple[str, ...]] = (
    COMMENT_STATUS_PENDING,
    COMMENT_STATUS_APPROVED,
    COMMENT_STATUS_REJECTED,
)
