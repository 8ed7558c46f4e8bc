from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.profile import ProfilePostgresRepository


def New(db: PostgresDatabase, logger: Logger) -> ProfilePostgresRepository:
    return ProfilePostgresRepository(db=db, logger=logger)


__all__ = ["New"]
