"""Base repository: generic CRUD and paging over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_core.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_model, create, flush_update, delete_model and paging.

    Works on ORM instances; subclasses map them to domain entities at their
    public interface.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model(self, entity_id: str) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and refresh server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def flush_update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and refresh it."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete_model(self, obj: ModelType) -> None:
        await self.db.delete(obj)
        await self.db.flush()

    async def count(self, stmt: Select[Any]) -> int:
        """Return the number of rows stmt would select."""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        result = await self.db.execute(count_stmt)
        return int(result.scalar_one())

    async def fetch_page(
        self, stmt: Select[Any], offset: int, limit: int
    ) -> list[ModelType]:
        result = await self.db.execute(stmt.offset(offset).limit(limit))
        return list(result.scalars().all())
