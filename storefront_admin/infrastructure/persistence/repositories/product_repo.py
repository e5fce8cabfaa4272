"""Product repository: catalog items for search."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.application.dtos.records import CatalogItemRecord
from storefront_admin.infrastructure.persistence.models.product import Product
from storefront_admin.infrastructure.persistence.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Read-only product access."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Product)

    async def list_for_search(self) -> list[CatalogItemRecord]:
        """Every product, oldest first, projected to the columns search needs."""
        stmt = select(Product.id, Product.title, Product.slug, Product.brand).order_by(
            Product.created_at, Product.id
        )
        result = await self.db.execute(stmt)
        return [
            CatalogItemRecord(id=row.id, title=row.title, slug=row.slug, brand=row.brand)
            for row in result.all()
        ]
