"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront_admin.application.dtos.records import (
        AccountRecord,
        CatalogItemRecord,
        OrderRecord,
    )


class ICatalogItemReader(Protocol):
    """Read-only access to products for search."""

    async def list_for_search(self) -> list[CatalogItemRecord]:
        """Return every product (id, title, slug, brand) in table order."""

    async def exists(self, item_id: str) -> bool:
        """Return whether a product with this id exists."""


class IOrderReader(Protocol):
    """Read-only access to orders (joined with customer) for search."""

    async def list_for_search(self) -> list[OrderRecord]:
        """Return every order with its customer's email and full name."""


class IAccountReader(Protocol):
    """Read-only access to user accounts for search."""

    async def list_for_search(self) -> list[AccountRecord]:
        """Return every account (id, email, full_name)."""


class IUserRoleReader(Protocol):
    """Role lookups backing the admin gate."""

    async def has_role(self, user_id: str, role: str) -> bool:
        """Return whether user_id holds role."""


class IDashboardReader(Protocol):
    """Aggregate reads for the dashboard summary."""

    async def count_products(self) -> int:
        """Return number of products."""

    async def count_orders(self) -> int:
        """Return number of orders."""

    async def count_users(self) -> int:
        """Return number of users."""

    async def sum_revenue(self, status: str) -> Decimal:
        """Return sum of total_amount over orders in status (0 when none)."""
