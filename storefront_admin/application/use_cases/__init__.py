"""Application use cases."""

from storefront_admin.application.use_cases.dashboard import GetDashboardStatsUseCase
from storefront_admin.application.use_cases.search import GlobalSearchService
from storefront_admin.application.use_cases.search_session import SearchSession

__all__ = ["GetDashboardStatsUseCase", "GlobalSearchService", "SearchSession"]
