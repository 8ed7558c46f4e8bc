class RepositoryError(Exception):
    pass


class ErrFailedToUpsert(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToUpsert",
]
