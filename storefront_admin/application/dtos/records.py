"""Read-model DTOs returned by the data-access layer (no dependency on ORM).

Only the columns the global search projects are carried; optional columns
are None when the row has no value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogItemRecord:
    """Product row as seen by search."""

    id: str
    title: str
    slug: str
    brand: str | None = None


@dataclass(frozen=True)
class OrderRecord:
    """Order row joined with its customer's email and name."""

    id: str
    payment_reference: str | None = None  # razorpay_order_id
    customer_email: str | None = None
    customer_full_name: str | None = None


@dataclass(frozen=True)
class AccountRecord:
    """User row as seen by search."""

    id: str
    email: str
    full_name: str | None = None
