from sqlalchemy import func, select, update as sql_update, delete as sql_delete
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from internal.model import Category, Post
from ..option import (
    ORDER_BY_CREATED_AT,
    GetOneOptions,
    ListOptions,
    UpdateOptions,
    DeleteOptions,
)


def _load_relations(stmt, with_tags: bool = True, category_joined: bool = False):
    options = [joinedload(Post.author)]
    if category_joined:
        options.append(contains_eager(Post.category))
    else:
        options.append(joinedload(Post.category))
    if with_tags:
        options.append(selectinload(Post.tags))
    return stmt.options(*options)


def build_list_query(opt: ListOptions):
    stmt = select(Post)

    if opt.category_slug:
        stmt = stmt.join(Post.category).where(Category.slug == opt.category_slug)
    if opt.status:
        stmt = stmt.where(Post.status == opt.status)

    stmt = _load_relations(
        stmt, with_tags=opt.with_tags, category_joined=bool(opt.category_slug)
    )

    # Ordering
    if opt.order_by == ORDER_BY_CREATED_AT:
        stmt = stmt.order_by(Post.created_at.desc())
    else:
        # Same effective publish time the views display
        stmt = stmt.order_by(func.coalesce(Post.published_at, Post.created_at).desc())

    # Limit
    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_get_one_query(opt: GetOneOptions):
    stmt = select(Post)

    if opt.id:
        stmt = stmt.where(Post.id == opt.id)
    if opt.slug:
        stmt = stmt.where(Post.slug == opt.slug)
    if opt.status:
        stmt = stmt.where(Post.status == opt.status)

    return _load_relations(stmt)


def build_update_query(opt: UpdateOptions):
    return (
        sql_update(Post)
        .where(Post.id == opt.id)
        .values(**opt.data)
        .returning(Post)
    )


def build_delete_query(opt: DeleteOptions):
    return sql_delete(Post).where(Post.id == opt.id)


__all__ = [
    "build_list_query",
    "build_get_one_query",
    "build_update_query",
    "build_delete_query",
]
