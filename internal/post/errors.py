class ErrPostNotFound(Exception):
    pass


class ErrInvalidInput(Exception):
    pass


class ErrNotAuthenticated(Exception):
    """Raised when a post is written without a caller identity."""

    pass


__all__ = [
    "ErrPostNotFound",
    "ErrInvalidInput",
    "ErrNotAuthenticated",
]
