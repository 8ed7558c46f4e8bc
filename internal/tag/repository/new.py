from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.tag import TagPostgresRepository


def New(db: PostgresDatabase, logger: Logger) -> TagPostgresRepository:
    return TagPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
