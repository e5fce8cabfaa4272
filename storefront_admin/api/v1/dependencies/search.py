"""Search and dashboard dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.application.services.fuzzy_matcher import FuzzyMatcher
from storefront_admin.application.services.result_router import ResultRouter
from storefront_admin.application.use_cases.dashboard import GetDashboardStatsUseCase
from storefront_admin.application.use_cases.search import GlobalSearchService
from storefront_admin.core.config import get_settings
from storefront_admin.infrastructure.persistence.database import get_db
from storefront_admin.infrastructure.persistence.repositories import (
    DashboardRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
)

from .repos import get_dashboard_repo, get_order_repo, get_product_repo, get_user_repo


def get_fuzzy_matcher() -> FuzzyMatcher:
    """Matcher configured from SEARCH_* settings."""
    settings = get_settings()
    return FuzzyMatcher(
        threshold=settings.search_threshold,
        distance=settings.search_distance,
        limit=settings.search_result_limit,
        min_query_length=settings.search_min_query_length,
    )


def get_result_router() -> ResultRouter:
    return ResultRouter(base_path=get_settings().admin_base_path)


async def get_search_service(
    product_repo: Annotated[ProductRepository, Depends(get_product_repo)],
    order_repo: Annotated[OrderRepository, Depends(get_order_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    matcher: Annotated[FuzzyMatcher, Depends(get_fuzzy_matcher)],
    router: Annotated[ResultRouter, Depends(get_result_router)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> GlobalSearchService:
    """Global search over products, orders and users.

    db is the same per-request session the repositories use (FastAPI caches
    get_db within a request); reads run in savepoints on it.
    """
    return GlobalSearchService(
        catalog_repo=product_repo,
        order_repo=order_repo,
        account_repo=user_repo,
        matcher=matcher,
        router=router,
        db=db,
    )


async def get_dashboard_stats_use_case(
    dashboard_repo: Annotated[DashboardRepository, Depends(get_dashboard_repo)],
) -> GetDashboardStatsUseCase:
    """Dashboard stats use case (counts and delivered revenue)."""
    return GetDashboardStatsUseCase(dashboard_repo=dashboard_repo)
