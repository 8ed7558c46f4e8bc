from typing import List
import uuid

from sqlalchemy import delete as sql_delete
from sqlalchemy.dialects.postgresql import insert as pg_insert

from internal.model import PostTag


def build_clear_post_tags_query(post_id: uuid.UUID):
    return sql_delete(PostTag).where(PostTag.post_id == post_id)


def build_insert_post_tags_query(post_id: uuid.UUID, tag_ids: List[uuid.UUID]):
    rows = [{"post_id": post_id, "tag_id": tag_id} for tag_id in tag_ids]
    return pg_insert(PostTag).values(rows).on_conflict_do_nothing()


__all__ = [
    "build_clear_post_tags_query",
    "build_insert_post_tags_query",
]
