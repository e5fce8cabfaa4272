"""Global search use case: one search session per request over the three sources."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from storefront_admin.application.dtos.search import NavigationTarget, SearchSnapshot
from storefront_admin.application.services.fuzzy_matcher import FuzzyMatcher
from storefront_admin.application.services.result_router import ResultRouter
from storefront_admin.application.use_cases.search_session import SearchSession, SourceLoader
from storefront_admin.domain.enums import SearchCategory
from storefront_admin.domain.exceptions import ResourceNotFoundException
from storefront_admin.shared.context import get_current_user_id
from storefront_admin.shared.telemetry.tracing import add_span_attributes, traced
from storefront_admin.shared.utils.identifiers import is_uuid

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from storefront_admin.application.interfaces.repositories import (
        IAccountReader,
        ICatalogItemReader,
        IOrderReader,
    )

logger = logging.getLogger(__name__)


class GlobalSearchService:
    """Fuzzy search across catalog items, orders and accounts.

    When serialize_reads is True the three source reads take turns on a
    shared lock (one AsyncSession cannot run concurrent statements); the
    session still applies each source as it completes. When db is given,
    each read runs in its own savepoint so a failed statement only fails
    that source, not the transaction the other reads share.
    """

    def __init__(
        self,
        catalog_repo: "ICatalogItemReader",
        order_repo: "IOrderReader",
        account_repo: "IAccountReader",
        matcher: FuzzyMatcher,
        router: ResultRouter,
        serialize_reads: bool = True,
        db: "AsyncSession | None" = None,
    ) -> None:
        self.catalog_repo = catalog_repo
        self.order_repo = order_repo
        self.account_repo = account_repo
        self.matcher = matcher
        self.router = router
        self.serialize_reads = serialize_reads
        self.db = db

    def new_session(self) -> SearchSession:
        return SearchSession(self.matcher, self.router)

    def loaders(self) -> dict[SearchCategory, SourceLoader]:
        """Source loaders in scan order, keyed by category."""
        loaders: dict[SearchCategory, SourceLoader] = {
            SearchCategory.CATALOG_ITEM: self.catalog_repo.list_for_search,
            SearchCategory.ORDER: self.order_repo.list_for_search,
            SearchCategory.ACCOUNT: self.account_repo.list_for_search,
        }
        if not self.serialize_reads:
            return loaders
        lock = asyncio.Lock()

        def _guarded(loader: SourceLoader) -> SourceLoader:
            async def run():
                async with lock:
                    if self.db is None:
                        return await loader()
                    async with self.db.begin_nested():
                        return await loader()

            return run

        return {category: _guarded(loader) for category, loader in loaders.items()}

    @traced("search.query")
    async def search(self, q: str) -> SearchSnapshot:
        """Run the query against freshly loaded sources.

        Short queries return a closed, empty snapshot without touching the
        database.
        """
        session = self.new_session()
        session.set_query(q)
        if not self.matcher.is_active(q):
            return session.snapshot()
        snapshot = await session.refresh(self.loaders())
        add_span_attributes(
            **{
                "search.query_length": len(q.strip()),
                "search.result_count": len(snapshot.hits),
            }
        )
        logger.debug(
            "Search matched %d entries (query length %d)",
            len(snapshot.hits),
            len(q.strip()),
        )
        return snapshot

    async def select(self, category: SearchCategory | str, entity_id: str) -> NavigationTarget:
        """Resolve a selected result to its navigation target.

        Catalog items are deep-linked, so the item must exist; an id that
        is not a uuid cannot name a row and is reported as not found.

        Raises:
            ValidationException: Unknown category.
            ResourceNotFoundException: Catalog item id does not exist.
        """
        target = self.router.route(category, entity_id)
        if target.category is SearchCategory.CATALOG_ITEM:
            if not is_uuid(entity_id) or not await self.catalog_repo.exists(entity_id):
                raise ResourceNotFoundException(target.category.value, entity_id)
        logger.info(
            "Search result selected by %s: %s",
            get_current_user_id() or "-",
            target.path,
        )
        return target
