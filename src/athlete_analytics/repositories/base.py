"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select


ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a record by its primary key."""
        return await self.session.get(self.model, id)

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)

    async def count(self, query: Any) -> int:
        """Count the rows a select would return."""
        result = await self.session.execute(
            select(func.count()).select_from(query.order_by(None).subquery())
        )
        return int(result.scalar_one())

    async def paginate(
        self,
        query: Any,  # SelectOfScalar - SQLModel query, already filtered and ordered
        page: int,
        limit: int,
    ) -> tuple[list[ModelType], int]:
        """Execute offset pagination on a query.

        Returns:
            Tuple of (items on the requested page, total matching rows)
        """
        total = await self.count(query)
        result = await self.session.execute(query.offset((page - 1) * limit).limit(limit))
        return list(result.scalars().all()), total


def ordered(query: Any, column: Any, sort_order: str, tiebreak: Any = None) -> Any:
    """Apply ``column`` ordering (``desc`` or ``asc``), then ``tiebreak`` in the same direction."""
    columns = [column] if tiebreak is None else [column, tiebreak]
    if sort_order == "desc":
        return query.order_by(*(c.desc() for c in columns))
    return query.order_by(*(c.asc() for c in columns))


LIKE_ESCAPE = "\\"


def contains(column: Any, value: str) -> Any:
    """Case-insensitive substring match; ``%`` and ``_`` in ``value`` match literally."""
    escaped = (
        value.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return func.lower(column).like(f"%{escaped}%", escape=LIKE_ESCAPE)
