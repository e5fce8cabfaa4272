"""Search session: component-local state of the global search.

Owns the current query, the current results, the open/closed flag of the
results panel, and the latest snapshot of each of the three sources. Every
query change and every source transition rebuilds the index and re-runs the
matcher; results are always computed from the latest query, so a slow fetch
can never publish results for an older one.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from storefront_admin.application.dtos.search import (
    NavigationTarget,
    SearchHit,
    SearchSnapshot,
)
from storefront_admin.application.services.fuzzy_matcher import FuzzyMatcher
from storefront_admin.application.services.result_router import ResultRouter
from storefront_admin.application.services.search_index import build_search_index
from storefront_admin.domain.entities import SearchEntry
from storefront_admin.domain.enums import SearchCategory, SourceStatus

logger = logging.getLogger(__name__)

SourceLoader = Callable[[], Awaitable[Sequence[Any]]]


class SearchSession:
    """Query, results and source state for one search component instance.

    Two observable states: results hidden and results shown. Shown iff the
    trimmed query is long enough and at least one entry matched.
    """

    def __init__(self, matcher: FuzzyMatcher, router: ResultRouter) -> None:
        self._matcher = matcher
        self._router = router
        self._query = ""
        self._hits: tuple[SearchHit, ...] = ()
        self._is_open = False
        self._records: dict[SearchCategory, Sequence[Any]] = {
            category: () for category in SearchCategory
        }
        self._status: dict[SearchCategory, SourceStatus] = {
            category: SourceStatus.NOT_LOADED for category in SearchCategory
        }
        self._generation = 0

    @property
    def query(self) -> str:
        return self._query

    @property
    def hits(self) -> tuple[SearchHit, ...]:
        return self._hits

    @property
    def results(self) -> list[SearchEntry]:
        return [hit.entry for hit in self._hits]

    @property
    def is_open(self) -> bool:
        return self._is_open

    def source_status(self, category: SearchCategory) -> SourceStatus:
        return self._status[category]

    def set_query(self, query: str) -> None:
        """Store the raw query and recompute results."""
        self._query = query
        self._recompute()

    def source_loaded(self, category: SearchCategory, records: Sequence[Any]) -> None:
        """Replace the snapshot of one source and recompute results."""
        self._records[category] = list(records)
        self._status[category] = SourceStatus.LOADED
        self._recompute()

    def source_failed(self, category: SearchCategory, error: BaseException) -> None:
        """Treat a source that failed to load as empty and recompute results."""
        logger.warning(
            "Search source %s failed to load; treating as empty: %s",
            category.value,
            error,
        )
        self._records[category] = ()
        self._status[category] = SourceStatus.FAILED
        self._recompute()

    async def refresh(self, loaders: Mapping[SearchCategory, SourceLoader]) -> SearchSnapshot:
        """Fetch sources concurrently, applying each result as it completes.

        Starting a new refresh supersedes any refresh still in flight: its
        late completions (including failures) are dropped, not merged.
        """
        self._generation += 1
        generation = self._generation

        async def _load(category: SearchCategory, loader: SourceLoader) -> None:
            try:
                records = await loader()
            except Exception as e:
                if generation == self._generation:
                    self.source_failed(category, e)
                return
            if generation != self._generation:
                logger.debug(
                    "Dropping stale %s snapshot (generation %d superseded by %d)",
                    category.value,
                    generation,
                    self._generation,
                )
                return
            self.source_loaded(category, records)

        await asyncio.gather(
            *(_load(category, loader) for category, loader in loaders.items())
        )
        return self.snapshot()

    def clear(self) -> None:
        """Empty the query and results and hide the panel."""
        self._query = ""
        self._hits = ()
        self._is_open = False

    def select(self, entry: SearchEntry) -> NavigationTarget:
        """Resolve the navigation target for entry, then clear the session."""
        target = self._router.route_entry(entry)
        self.clear()
        return target

    def snapshot(self) -> SearchSnapshot:
        return SearchSnapshot(
            query=self._query,
            is_open=self._is_open,
            hits=self._hits,
            sources=dict(self._status),
        )

    def _recompute(self) -> None:
        if not self._matcher.is_active(self._query):
            self._hits = ()
            self._is_open = False
            return
        entries = build_search_index(
            catalog_items=self._records[SearchCategory.CATALOG_ITEM],
            orders=self._records[SearchCategory.ORDER],
            accounts=self._records[SearchCategory.ACCOUNT],
        )
        self._hits = tuple(self._matcher.search(entries, self._query))
        self._is_open = bool(self._hits)
