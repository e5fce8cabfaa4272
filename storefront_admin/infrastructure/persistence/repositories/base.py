"""Base repository: generic read helpers shared by the read-only repositories."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with exists and count.

    This service never writes; the hosted database owns inserts and updates.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def exists(self, entity_id: str) -> bool:
        """Return whether a record with this primary key exists."""
        model: Any = self.model
        result = await self.db.execute(
            select(model.id).where(model.id == entity_id).limit(1)
        )
        return result.first() is not None

    async def count(self) -> int:
        """Return total number of rows."""
        result = await self.db.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())
