"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories, the admin gate and use cases.
Routes depend only on these dependencies, not on infrastructure directly.
"""

from .auth import get_current_user_id, require_admin
from .repos import (
    get_dashboard_repo,
    get_order_repo,
    get_product_repo,
    get_user_repo,
    get_user_role_repo,
)
from .search import (
    get_dashboard_stats_use_case,
    get_fuzzy_matcher,
    get_result_router,
    get_search_service,
)

__all__ = [
    "get_current_user_id",
    "get_dashboard_repo",
    "get_dashboard_stats_use_case",
    "get_fuzzy_matcher",
    "get_order_repo",
    "get_product_repo",
    "get_result_router",
    "get_search_service",
    "get_user_repo",
    "get_user_role_repo",
    "require_admin",
]
