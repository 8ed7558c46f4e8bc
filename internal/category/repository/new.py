from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.category import CategoryPostgresRepository


def New(db: PostgresDatabase, logger: Logger) -> CategoryPostgresRepository:
    return CategoryPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
