"""Result router: maps a selected search entry to an admin navigation path.

Only catalog items have a per-record detail route; orders and accounts go
to their list views.
"""

from storefront_admin.application.dtos.search import NavigationTarget
from storefront_admin.domain.entities import SearchEntry
from storefront_admin.domain.enums import SearchCategory
from storefront_admin.domain.exceptions import ValidationException


class ResultRouter:
    """Builds navigation targets under a configurable admin base path."""

    def __init__(self, base_path: str = "/admin") -> None:
        self.base_path = base_path.rstrip("/")

    def route(self, category: SearchCategory | str, entity_id: str) -> NavigationTarget:
        """Return the target for (category, id).

        Raises:
            ValidationException: If category is not a known search category.
        """
        try:
            category = SearchCategory(category)
        except ValueError as e:
            raise ValidationException(
                f"Unknown search category: {category!r}; "
                f"expected one of {SearchCategory.values()}",
                field="category",
            ) from e
        if category is SearchCategory.CATALOG_ITEM:
            path = f"{self.base_path}/products/{entity_id}"
        elif category is SearchCategory.ORDER:
            path = f"{self.base_path}/orders"
        else:
            path = f"{self.base_path}/users"
        return NavigationTarget(category=category, path=path)

    def route_entry(self, entry: SearchEntry) -> NavigationTarget:
        """Return the target for a selected entry."""
        return self.route(entry.category, entry.id)
