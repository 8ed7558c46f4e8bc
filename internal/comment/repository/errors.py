class RepositoryError(Exception):
    pass


class ErrFailedToCreate(RepositoryError):
    pass


class ErrFailedToGet(RepositoryError):
    pass


class ErrFailedToUpdate(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToCreate",
    "ErrFailedToGet",
    "ErrFailedToUpdate",
]
