"""Search entry: the transient, derived record the global search matches on.

Entries are projected from catalog items, orders and accounts on every
recompute and discarded afterwards; they are never persisted.
"""

from dataclasses import dataclass

from storefront_admin.domain.enums import SearchCategory
from storefront_admin.domain.exceptions import ValidationException


@dataclass(frozen=True)
class SearchEntry:
    """One searchable row, tagged by the collection it came from.

    id is unique within a category only, so (category, id) identifies an
    entry. search_text is used for matching and never displayed.
    """

    category: SearchCategory
    id: str
    title: str
    search_text: str
    subtitle: str | None = None

    def __post_init__(self) -> None:
        if not self.search_text:
            raise ValidationException("search_text must be non-empty", field="search_text")

    @property
    def key(self) -> tuple[SearchCategory, str]:
        """(category, id) pair identifying this entry across categories."""
        return (self.category, self.id)
