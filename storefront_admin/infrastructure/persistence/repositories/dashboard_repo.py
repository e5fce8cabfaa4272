"""Dashboard repository: aggregate reads over products, orders and users."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.infrastructure.persistence.repositories.order_repo import OrderRepository
from storefront_admin.infrastructure.persistence.repositories.product_repo import (
    ProductRepository,
)
from storefront_admin.infrastructure.persistence.repositories.user_repo import UserRepository


class DashboardRepository:
    """Counts and revenue for the dashboard, delegating to the table repositories."""

    def __init__(self, db: AsyncSession) -> None:
        self.products = ProductRepository(db)
        self.orders = OrderRepository(db)
        self.users = UserRepository(db)

    async def count_products(self) -> int:
        return await self.products.count()

    async def count_orders(self) -> int:
        return await self.orders.count()

    async def count_users(self) -> int:
        return await self.users.count()

    async def sum_revenue(self, status: str) -> Decimal:
        return await self.orders.sum_total_by_status(status)
