"""Persistence models: ORM entities and mixins."""

from storefront_admin.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)
from storefront_admin.infrastructure.persistence.models.order import Order
from storefront_admin.infrastructure.persistence.models.product import Product
from storefront_admin.infrastructure.persistence.models.user import User, UserRole

__all__ = [
    "CreatedAtMixin",
    "Order",
    "Product",
    "UUIDPrimaryKeyMixin",
    "User",
    "UserRole",
]
