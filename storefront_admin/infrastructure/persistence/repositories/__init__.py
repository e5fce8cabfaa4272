"""Read-only SQLAlchemy repositories implementing the application ports."""

from storefront_admin.infrastructure.persistence.repositories.base import BaseRepository
from storefront_admin.infrastructure.persistence.repositories.dashboard_repo import (
    DashboardRepository,
)
from storefront_admin.infrastructure.persistence.repositories.order_repo import OrderRepository
from storefront_admin.infrastructure.persistence.repositories.product_repo import (
    ProductRepository,
)
from storefront_admin.infrastructure.persistence.repositories.user_repo import (
    UserRepository,
    UserRoleRepository,
)

__all__ = [
    "BaseRepository",
    "DashboardRepository",
    "OrderRepository",
    "ProductRepository",
    "UserRepository",
    "UserRoleRepository",
]
