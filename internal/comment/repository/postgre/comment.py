from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model import Comment
from ..interface import ICommentRepository
from ..option import CreateOptions, ListOptions, UpdateStatusOptions
from ..errors import ErrFailedToCreate, ErrFailedToGet, ErrFailedToUpdate
from .comment_query import build_list_query, build_update_status_query
from .helpers import transform_to_comment


class CommentPostgresRepository(ICommentRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def create(self, opt: CreateOptions) -> Comment:
        transformed = transform_to_comment(opt.data)

        try:
            async with self.db.get_session() as session:
                record = Comment(**transformed)
                session.add(record)
                await session.commit()
                await session.refresh(record)

                return record

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.comment.repository.postgre.comment.create: {exc}"
            )
            raise ErrFailedToCreate(exc) from exc

    async def list(self, opt: ListOptions) -> List[Comment]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                return list(result.scalars().all())

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.comment.repository.postgre.comment.list: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def update_status(self, opt: UpdateStatusOptions) -> Optional[Comment]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_update_status_query(opt))
                record = result.scalar_one_or_none()
                await session.commit()
                return record

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.comment.repository.postgre.comment.update_status: {exc}"
            )
            raise ErrFailedToUpdate(exc) from exc


__all__ = ["CommentPostgresRepository"]
