from .interface import IProfileRepository
from .new import New
from .option import GetOrCreateOptions
from .errors import RepositoryError, ErrFailedToUpsert

__all__ = [
    "IProfileRepository",
    "New",
    "GetOrCreateOptions",
    "RepositoryError",
    "ErrFailedToUpsert",
]
