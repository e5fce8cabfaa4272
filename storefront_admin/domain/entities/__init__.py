"""Domain entities."""

from storefront_admin.domain.entities.search_entry import SearchEntry

__all__ = ["SearchEntry"]
