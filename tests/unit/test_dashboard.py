"""GetDashboardStatsUseCase with a mocked dashboard repo."""

from decimal import Decimal
from unittest.mock import AsyncMock

from storefront_admin.application.use_cases.dashboard import GetDashboardStatsUseCase


async def test_dashboard_stats_sum_delivered_revenue() -> None:
    repo = AsyncMock()
    repo.count_products = AsyncMock(return_value=5)
    repo.count_orders = AsyncMock(return_value=7)
    repo.count_users = AsyncMock(return_value=3)
    repo.sum_revenue = AsyncMock(return_value=Decimal("250.00"))

    stats = await GetDashboardStatsUseCase(repo).get_dashboard_stats()

    assert stats.total_products == 5
    assert stats.total_orders == 7
    assert stats.total_users == 3
    assert stats.revenue == Decimal("250.00")
    repo.sum_revenue.assert_awaited_once_with("delivered")
