from sqlalchemy import select

from internal.model import Category
from ..option import ListOptions


def build_list_query(opt: ListOptions):
    stmt = select(Category).order_by(Category.name.asc())

    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_get_by_slug_query(slug: str):
    return select(Category).where(Category.slug == slug)


__all__ = ["build_list_query", "build_get_by_slug_query"]
