class RepositoryError(Exception):
    pass


class ErrFailedToGet(RepositoryError):
    pass


class ErrFailedToUpsert(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
]
