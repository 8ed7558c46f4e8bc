from .interface import ICommentRepository
from .new import New
from .option import CreateOptions, ListOptions, UpdateStatusOptions
from .errors import (
    RepositoryError,
    ErrFailedToCreate,
    ErrFailedToGet,
    ErrFailedToUpdate,
)

__all__ = [
    "ICommentRepository",
    "New",
    "CreateOptions",
    "ListOptions",
    "UpdateStatusOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToUpdate",
]
