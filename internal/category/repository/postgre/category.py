from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.helpers import get_or_insert
from pkg.postgre.postgres import PostgresDatabase
from internal.model import Category
from ..interface import ICategoryRepository
from ..option import GetOrCreateOptions, ListOptions
from ..errors import ErrFailedToGet, ErrFailedToUpsert
from .category_query import build_list_query, build_get_by_slug_query


class CategoryPostgresRepository(ICategoryRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def list(self, opt: ListOptions) -> List[Category]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                return list(result.scalars().all())

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.category.repository.postgre.category.list: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_get_by_slug_query(slug))
                return result.scalar_one_or_none()

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.category.repository.postgre.category.get_by_slug: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def get_or_create(self, opt: GetOrCreateOptions) -> Category:
        try:
            async with self.db.get_session() as session:
                return await get_or_insert(
                    session,
                    Category,
                    "slug",
                    {
                        "slug": opt.slug,
                        "name": opt.name,
                        "description": opt.description,
                    },
                )

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.category.repository.postgre.category.get_or_create: {exc}"
            )
            raise ErrFailedToUpsert(exc) from exc


__all__ = ["CategoryPostgresRepository"]
