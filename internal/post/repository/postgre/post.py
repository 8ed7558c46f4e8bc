from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model import Post
from ..interface import IPostRepository
from ..option import (
    CreateOptions,
    UpdateOptions,
    GetOneOptions,
    ListOptions,
    DeleteOptions,
)
from ..errors import (
    ErrFailedToCreate,
    ErrFailedToGet,
    ErrFailedToUpdate,
    ErrFailedToDelete,
)
from .post_query import (
    build_list_query,
    build_get_one_query,
    build_update_query,
    build_delete_query,
)


class PostPostgresRepository(IPostRepository):
    """Posts table access.

    Reads return Post rows with author, category and (unless disabled)
    tags already loaded; writes return bare rows.
    """

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def create(self, opt: CreateOptions) -> Post:
        try:
            async with self.db.get_session() as session:
                record = Post(**opt.data)
                session.add(record)
                await session.commit()
                await session.refresh(record)

                return record

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.create: {exc}"
            )
            raise ErrFailedToCreate(exc) from exc

    async def update(self, opt: UpdateOptions) -> Optional[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_update_query(opt))
                record = result.scalar_one_or_none()
                await session.commit()

                return record

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.update: {exc}"
            )
            raise ErrFailedToUpdate(exc) from exc

    async def get_one(self, opt: GetOneOptions) -> Optional[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_get_one_query(opt))
                return result.scalar_one_or_none()

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.get_one: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def list(self, opt: ListOptions) -> List[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                return list(result.scalars().all())

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.list: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def delete(self, opt: DeleteOptions) -> bool:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_delete_query(opt))
                await session.commit()
                return result.rowcount > 0

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.delete: {exc}"
            )
            raise ErrFailedToDelete(exc) from exc


__all__ = ["PostPostgresRepository"]
