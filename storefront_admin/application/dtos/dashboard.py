"""DTOs for the dashboard summary (no dependency on ORM)."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DashboardStats:
    """Headline counts for the admin dashboard.

    revenue sums total_amount over delivered orders only.
    """

    total_products: int
    total_orders: int
    total_users: int
    revenue: Decimal
