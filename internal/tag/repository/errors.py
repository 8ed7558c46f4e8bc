class RepositoryError(Exception):
    pass


class ErrFailedToUpsert(RepositoryError):
    pass


class ErrFailedToReplace(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToUpsert",
    "ErrFailedToReplace",
]
