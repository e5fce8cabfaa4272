"""Dashboard use case: headline counts and delivered revenue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront_admin.application.dtos.dashboard import DashboardStats
from storefront_admin.domain.enums import OrderStatus

if TYPE_CHECKING:
    from storefront_admin.application.interfaces.repositories import IDashboardReader


class GetDashboardStatsUseCase:
    """Get product, order and user counts plus revenue from delivered orders."""

    def __init__(self, dashboard_repo: "IDashboardReader") -> None:
        self.dashboard_repo = dashboard_repo

    async def get_dashboard_stats(self) -> DashboardStats:
        return DashboardStats(
            total_products=await self.dashboard_repo.count_products(),
            total_orders=await self.dashboard_repo.count_orders(),
            total_users=await self.dashboard_repo.count_users(),
            revenue=await self.dashboard_repo.sum_revenue(OrderStatus.DELIVERED.value),
        )
