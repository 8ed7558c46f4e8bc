from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.helpers import get_or_insert
from pkg.postgre.postgres import PostgresDatabase
from internal.model import Tag
from ..interface import ITagRepository
from ..option import GetOrCreateOptions, ReplacePostTagsOptions
from ..errors import ErrFailedToUpsert, ErrFailedToReplace
from .tag_query import build_clear_post_tags_query, build_insert_post_tags_query


class TagPostgresRepository(ITagRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def get_or_create(self, opt: GetOrCreateOptions) -> Tag:
        try:
            async with self.db.get_session() as session:
                return await get_or_insert(
                    session, Tag, "slug", {"slug": opt.slug, "name": opt.name}
                )

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.tag.repository.postgre.tag.get_or_create: {exc}"
            )
            raise ErrFailedToUpsert(exc) from exc

    async def replace_post_tags(self, opt: ReplacePostTagsOptions) -> int:
        """Swap a post's whole association set in a single transaction."""
        tag_ids = list(dict.fromkeys(opt.tag_ids))

        try:
            async with self.db.get_session() as session:
                await session.execute(build_clear_post_tags_query(opt.post_id))
                if tag_ids:
                    await session.execute(
                        build_insert_post_tags_query(opt.post_id, tag_ids)
                    )
                await session.commit()
                return len(tag_ids)

        except (SQLAlchemyError, OSError) as exc:
            self.logger.error(
                f"internal.tag.repository.postgre.tag.replace_post_tags: {exc}"
            )
            raise ErrFailedToReplace(exc) from exc


__all__ = ["TagPostgresRepository"]
