"""Domain enumerations for the storefront admin.

Enums represent fixed sets of domain values (search categories, order
status, account roles).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class SearchCategory(_ValuesMixin, str, Enum):
    """Source collection of a search entry.

    Declaration order is the scan order of the search index: catalog items,
    then orders, then accounts. Ties in relevance keep this order.
    """

    CATALOG_ITEM = "catalog_item"
    ORDER = "order"
    ACCOUNT = "account"


class OrderStatus(_ValuesMixin, str, Enum):
    """Order fulfilment status as stored in the orders table."""

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class AppRole(_ValuesMixin, str, Enum):
    """Role granted to an account in user_roles."""

    ADMIN = "admin"
    USER = "user"


class SourceStatus(_ValuesMixin, str, Enum):
    """Load status of one search source.

    NOT_LOADED and FAILED both count as an empty collection for matching.
    """

    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"
