class ErrCommentNotFound(Exception):
    pass


class ErrInvalidInput(Exception):
    pass


__all__ = [
    "ErrCommentNotFound",
    "ErrInvalidInput",
]
