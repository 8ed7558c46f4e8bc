from typing import Any, Dict, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


async def get_or_insert(
    session: AsyncSession,
    model: Type[ModelT],
    key: str,
    values: Dict[str, Any],
) -> ModelT:
    """Return the row whose unique ``key`` equals ``values[key]``, inserting it if missing.

    The insert is ``ON CONFLICT DO NOTHING`` on the unique column, so two
    concurrent callers racing on the same key both end up reading the single
    row that won. Commits the session when a row was inserted.
    """
    column = getattr(model, key)
    stmt = select(model).where(column == values[key])

    existing = (await session.execute(stmt)).scalar_one_or_none()
    if existing is not None:
        return existing

    insert_stmt = (
        pg_insert(model).values(**values).on_conflict_do_nothing(index_elements=[key])
    )
    await session.execute(insert_stmt)
    await session.commit()

    return (await session.execute(stmt)).scalar_one()


__all__ = ["get_or_insert"]
