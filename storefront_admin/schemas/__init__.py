"""API request/response schemas (Pydantic)."""

from storefront_admin.schemas.dashboard import DashboardStatsResponse
from storefront_admin.schemas.health import HealthResponse
from storefront_admin.schemas.search import (
    SearchResponse,
    SearchResultItemResponse,
    SearchSelectRequest,
    SearchSelectResponse,
)

__all__ = [
    "DashboardStatsResponse",
    "HealthResponse",
    "SearchResponse",
    "SearchResultItemResponse",
    "SearchSelectRequest",
    "SearchSelectResponse",
]
