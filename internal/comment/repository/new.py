from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.comment import CommentPostgresRepository


def New(db: PostgresDatabase, logger: Logger) -> CommentPostgresRepository:
    return CommentPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
