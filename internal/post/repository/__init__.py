from .interface import IPostRepository
from .new import New
from .option import (
    ORDER_BY_PUBLISHED_AT,
    ORDER_BY_CREATED_AT,
    CreateOptions,
    UpdateOptions,
    GetOneOptions,
    ListOptions,
    DeleteOptions,
)
from .errors import (
    RepositoryError,
    ErrFailedToCreate,
    ErrFailedToGet,
    ErrFailedToUpdate,
    ErrFailedToDelete,
)

__all__ = [
    "IPostRepository",
    "New",
    "ORDER_BY_PUBLISHED_AT",
    "ORDER_BY_CREATED_AT",
    "CreateOptions",
    "UpdateOptions",
    "GetOneOptions",
    "ListOptions",
    "DeleteOptions",
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToUpdate",
    "ErrFailedToDelete",
]
