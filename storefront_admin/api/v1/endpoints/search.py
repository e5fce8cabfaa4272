"""Search API: global fuzzy search across catalog items, orders and accounts."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from storefront_admin.api.v1.dependencies import get_search_service, require_admin
from storefront_admin.application.use_cases.search import GlobalSearchService
from storefront_admin.core.limiter import limit_search
from storefront_admin.schemas.search import (
    SearchResponse,
    SearchResultItemResponse,
    SearchSelectRequest,
    SearchSelectResponse,
)

router = APIRouter()


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    _: Annotated[str, Depends(require_admin)],
    search_svc: Annotated[GlobalSearchService, Depends(get_search_service)],
    q: str = Query("", max_length=200, description="Free-text query"),
):
    """Fuzzy search; queries shorter than the minimum return a closed, empty list."""
    snapshot = await search_svc.search(q)
    return SearchResponse(
        query=snapshot.query,
        open=snapshot.is_open,
        results=[
            SearchResultItemResponse(
                category=hit.entry.category,
                id=hit.entry.id,
                title=hit.entry.title,
                subtitle=hit.entry.subtitle,
                score=hit.score,
                target=search_svc.router.route_entry(hit.entry).path,
            )
            for hit in snapshot.hits
        ],
        sources=snapshot.sources,
    )


@router.post("/select", response_model=SearchSelectResponse)
async def select_result(
    body: SearchSelectRequest,
    _: Annotated[str, Depends(require_admin)],
    search_svc: Annotated[GlobalSearchService, Depends(get_search_service)],
):
    """Resolve a selected result to the admin path to open (400 unknown category, 404 missing product)."""
    target = await search_svc.select(body.category, body.id)
    return SearchSelectResponse(category=target.category, id=body.id, target=target.path)
