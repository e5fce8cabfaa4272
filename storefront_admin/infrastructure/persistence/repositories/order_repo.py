"""Order repository: orders joined with their customer for search."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.application.dtos.records import OrderRecord
from storefront_admin.infrastructure.persistence.models.order import Order
from storefront_admin.infrastructure.persistence.models.user import User
from storefront_admin.infrastructure.persistence.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """Read-only order access."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Order)

    async def list_for_search(self) -> list[OrderRecord]:
        """Every order, oldest first; customer fields are None for guest orders."""
        stmt = (
            select(
                Order.id,
                Order.razorpay_order_id,
                User.email,
                User.full_name,
            )
            .outerjoin(User, Order.user_id == User.id)
            .order_by(Order.created_at, Order.id)
        )
        result = await self.db.execute(stmt)
        return [
            OrderRecord(
                id=row.id,
                payment_reference=row.razorpay_order_id,
                customer_email=row.email,
                customer_full_name=row.full_name,
            )
            for row in result.all()
        ]

    async def sum_total_by_status(self, status: str) -> Decimal:
        """Sum of total_amount over orders in status; Decimal(0) when none."""
        stmt = select(func.coalesce(func.sum(Order.total_amount), 0)).where(
            Order.status == status
        )
        result = await self.db.execute(stmt)
        return Decimal(result.scalar_one())
