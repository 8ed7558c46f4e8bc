from .interface import ITagRepository
from .new import New
from .option import GetOrCreateOptions, ReplacePostTagsOptions
from .errors import RepositoryError, ErrFailedToUpsert, ErrFailedToReplace

__all__ = [
    "ITagRepository",
    "New",
    "GetOrCreateOptions",
    "ReplacePostTagsOptions",
    "RepositoryError",
    "ErrFailedToUpsert",
    "ErrFailedToReplace",
]
