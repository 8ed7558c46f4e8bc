from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.helpers import get_or_insert
from pkg.postgre.postgres import PostgresDatabase
from internal.model import Profile
from ..interface import IProfileRepository
from ..option import GetOrCreateOptions
from ..errors import ErrFailedToUpsert


class ProfilePostgresRepository(IProfileRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def get_or_create(self, opt: GetOrCreateOptions) -> Profile:
        try:
            async with self.db.get_session() as session:
                return await get_or_insert(
                    session,
                    Profile,
                    "user_id",
                    {"user_id": opt.user_id, "display_name": opt.display_name},
                )

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.profile.repository.postgre.profile.get_or_create: {exc}"
            )
            raise ErrFailedToUpsert(exc) from exc


__all__ = ["ProfilePostgresRepository"]
