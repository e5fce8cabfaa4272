"""Dashboard API: headline counts and delivered revenue."""

from typing import Annotated

from fastapi import APIRouter, Depends

from storefront_admin.api.v1.dependencies import get_dashboard_stats_use_case, require_admin
from storefront_admin.application.use_cases.dashboard import GetDashboardStatsUseCase
from storefront_admin.schemas.dashboard import DashboardStatsResponse

router = APIRouter()


@router.get("", response_model=DashboardStatsResponse)
async def get_dashboard(
    _: Annotated[str, Depends(require_admin)],
    use_case: Annotated[GetDashboardStatsUseCase, Depends(get_dashboard_stats_use_case)],
):
    """Product, order and user totals plus revenue from delivered orders."""
    stats = await use_case.get_dashboard_stats()
    return DashboardStatsResponse(
        total_products=stats.total_products,
        total_orders=stats.total_orders,
        total_users=stats.total_users,
        revenue=stats.revenue,
    )
