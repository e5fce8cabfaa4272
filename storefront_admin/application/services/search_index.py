"""Search index builder: projects catalog items, orders and accounts into entries.

The index is a flat list in scan order (catalog items, orders, accounts;
source order within each). It is rebuilt from scratch on every recompute.
"""

from collections.abc import Iterable, Sequence

from storefront_admin.application.dtos.records import (
    AccountRecord,
    CatalogItemRecord,
    OrderRecord,
)
from storefront_admin.domain.entities import SearchEntry
from storefront_admin.domain.enums import SearchCategory

ORDER_TITLE_ID_LENGTH = 8


def _join_text(*parts: str | None) -> str:
    """Join non-empty parts with a single space. None and blanks are skipped."""
    return " ".join(p.strip() for p in parts if p and p.strip())


def _or_none(value: str | None) -> str | None:
    """Return value stripped, or None when it is None or blank."""
    if value and value.strip():
        return value.strip()
    return None


def project_catalog_item(item: CatalogItemRecord) -> SearchEntry | None:
    """title = name, subtitle = brand, text = name + slug + brand."""
    text = _join_text(item.title, item.slug, item.brand)
    if not text:
        return None
    return SearchEntry(
        category=SearchCategory.CATALOG_ITEM,
        id=item.id,
        title=item.title.strip(),
        subtitle=_or_none(item.brand),
        search_text=text,
    )


def project_order(order: OrderRecord) -> SearchEntry | None:
    """title = "Order <first 8 of id>", subtitle = customer email or name."""
    text = _join_text(
        order.id,
        order.payment_reference,
        order.customer_email,
        order.customer_full_name,
    )
    if not text:
        return None
    return SearchEntry(
        category=SearchCategory.ORDER,
        id=order.id,
        title=f"Order {order.id[:ORDER_TITLE_ID_LENGTH]}",
        subtitle=_or_none(order.customer_email) or _or_none(order.customer_full_name),
        search_text=text,
    )


def project_account(account: AccountRecord) -> SearchEntry | None:
    """title = full name or email; subtitle = email only when a name is shown."""
    text = _join_text(account.full_name, account.email)
    if not text:
        return None
    full_name = _or_none(account.full_name)
    return SearchEntry(
        category=SearchCategory.ACCOUNT,
        id=account.id,
        title=full_name or account.email.strip(),
        subtitle=_or_none(account.email) if full_name else None,
        search_text=text,
    )


def _project_all(records: Iterable, projector) -> list[SearchEntry]:
    entries = []
    for record in records:
        entry = projector(record)
        if entry is not None:
            entries.append(entry)
    return entries


def build_search_index(
    catalog_items: Sequence[CatalogItemRecord] | None = None,
    orders: Sequence[OrderRecord] | None = None,
    accounts: Sequence[AccountRecord] | None = None,
) -> list[SearchEntry]:
    """Return entries for all three collections; None counts as empty."""
    return [
        *_project_all(catalog_items or (), project_catalog_item),
        *_project_all(orders or (), project_order),
        *_project_all(accounts or (), project_account),
    ]
