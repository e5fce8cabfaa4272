"""Application DTOs: read models passed between repositories, use cases and API."""

from storefront_admin.application.dtos.dashboard import DashboardStats
from storefront_admin.application.dtos.records import (
    AccountRecord,
    CatalogItemRecord,
    OrderRecord,
)
from storefront_admin.application.dtos.search import (
    NavigationTarget,
    SearchHit,
    SearchSnapshot,
)

__all__ = [
    "AccountRecord",
    "CatalogItemRecord",
    "DashboardStats",
    "NavigationTarget",
    "OrderRecord",
    "SearchHit",
    "SearchSnapshot",
]
