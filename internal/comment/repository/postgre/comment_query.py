from sqlalchemy import select, update as sql_update

from internal.model import Comment
from ..option import ListOptions, UpdateStatusOptions


def build_list_query(opt: ListOptions):
    stmt = select(Comment)

    if opt.post_id:
        stmt = stmt.where(Comment.post_id == opt.post_id)
    if opt.status:
        stmt = stmt.where(Comment.status == opt.status)

    stmt = stmt.order_by(Comment.created_at.asc())

    if opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_update_status_query(opt: UpdateStatusOptions):
    return (
        sql_update(Comment)
        .where(Comment.id == opt.id)
        .values(status=opt.status)
        .returning(Comment)
    )


__all__ = ["build_list_query", "build_update_status_query"]
