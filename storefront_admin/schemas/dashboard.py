"""Dashboard API schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field


class DashboardStatsResponse(BaseModel):
    """Headline counts for GET /dashboard."""

    total_products: int
    total_orders: int
    total_users: int
    revenue: Decimal = Field(..., description="Sum of delivered order totals")
