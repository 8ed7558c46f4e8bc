from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.post import PostPostgresRepository


def New(db: PostgresDatabase, logger: Logger) -> PostPostgresRepository:
    return PostPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
