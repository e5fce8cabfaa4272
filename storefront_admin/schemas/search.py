"""Search API schemas."""

from pydantic import BaseModel, Field

from storefront_admin.domain.enums import SearchCategory, SourceStatus


class SearchResultItemResponse(BaseModel):
    """Single search hit (catalog item, order, or account)."""

    category: SearchCategory = Field(..., description="catalog_item | order | account")
    id: str
    title: str
    subtitle: str | None = None
    score: float = Field(..., description="0 = exact match, 1 = no match")
    target: str = Field(..., description="Admin path to open when selected")


class SearchResponse(BaseModel):
    """Global search response: matched entries plus per-source load status."""

    query: str
    open: bool = Field(..., description="Whether the result list should be shown")
    results: list[SearchResultItemResponse]
    sources: dict[SearchCategory, SourceStatus]


class SearchSelectRequest(BaseModel):
    """Body for POST /search/select."""

    category: str = Field(..., min_length=1, max_length=50)
    id: str = Field(..., min_length=1, max_length=100)


class SearchSelectResponse(BaseModel):
    """Navigation target for a selected result."""

    category: SearchCategory
    id: str
    target: str
