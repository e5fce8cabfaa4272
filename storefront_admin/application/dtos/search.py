"""DTOs for global search results (no dependency on ORM)."""

from dataclasses import dataclass, field

from storefront_admin.domain.entities import SearchEntry
from storefront_admin.domain.enums import SearchCategory, SourceStatus


@dataclass(frozen=True)
class SearchHit:
    """Matched entry with its score (0 = exact, 1 = no match) and scan index."""

    entry: SearchEntry
    score: float
    index: int


@dataclass(frozen=True)
class NavigationTarget:
    """Where the admin front end should go after a result is selected."""

    category: SearchCategory
    path: str


@dataclass(frozen=True)
class SearchSnapshot:
    """Immutable view of a search session at one point in time."""

    query: str
    is_open: bool
    hits: tuple[SearchHit, ...] = ()
    sources: dict[SearchCategory, SourceStatus] = field(default_factory=dict)

    @property
    def entries(self) -> list[SearchEntry]:
        """Matched entries, most relevant first."""
        return [hit.entry for hit in self.hits]
