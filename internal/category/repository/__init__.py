from .interface import ICategoryRepository
from .new import New
from .option import GetOrCreateOptions, ListOptions
from .errors import RepositoryError, ErrFailedToGet, ErrFailedToUpsert

__all__ = [
    "ICategoryRepository",
    "New",
    "GetOrCreateOptions",
    "ListOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
]
