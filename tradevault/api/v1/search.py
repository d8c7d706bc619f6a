"""
Search API.

Unified search across assets, users and investments with structured
filters, relevance ranking, pagination and autocomplete.
"""

import logging
from typing import List, Optional, Dict, Any

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from tradevault.core.config import get_settings
from tradevault.core.database import get_optional_db
from tradevault.search.engine import SearchEngine
from tradevault.search.parsing import parse_timestamp
from tradevault.search.types import (
    ALL_TYPES,
    DateRange,
    EntityType,
    SearchFilters,
    SearchOptions,
    SearchResponse as EngineSearchResponse,
    SortBy,
    SortOrder,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["Search"])

VALID_TYPES = {t.value for t in EntityType} | {ALL_TYPES}


# =============================================================================
# Request/Response Models
# =============================================================================


class SearchResultResponse(BaseModel):
    """A single search result."""
    id: str = Field(..., description="Source record ID")
    type: str = Field(..., description="Entity type: asset, user, investment")
    title: str = Field(..., description="Headline derived from the record")
    description: str = Field(..., description="Secondary line")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Type-specific fields")
    relevance_score: float = Field(..., description="Relevance score (0-100)")
    category: Optional[str] = Field(None, description="Asset type, user role or investment type")
    status: Optional[str] = Field(None, description="Record lifecycle status")
    created_at: str = Field(..., description="ISO-8601 creation time")


class SearchResponse(BaseModel):
    """Complete search response."""
    success: bool
    results: List[SearchResultResponse] = Field(..., description="One page of results")
    total: int = Field(..., description="Total matching results before pagination")
    query: str = Field(..., description="Original search query")
    source: Optional[str] = Field(None, description="Data path used: database or fallback")
    search_time_ms: float = Field(..., description="Search execution time in milliseconds")


class DateRangeRequest(BaseModel):
    start: str
    end: str


class SearchFiltersRequest(BaseModel):
    type: Optional[str] = Field(None, description="asset, user, investment or all")
    category: Optional[str] = None
    status: Optional[str] = None
    date_range: Optional[DateRangeRequest] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None


class SearchOptionsRequest(BaseModel):
    limit: Optional[int] = Field(None, ge=0, le=100, description="Defaults to SEARCH_DEFAULT_LIMIT")
    offset: int = Field(0, ge=0)
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESC


class SearchRequest(BaseModel):
    """Body for POST /search."""
    query: str = ""
    filters: SearchFiltersRequest = Field(default_factory=SearchFiltersRequest)
    options: SearchOptionsRequest = Field(default_factory=SearchOptionsRequest)


class SuggestionsResponse(BaseModel):
    success: bool
    suggestions: List[str]
    query: str


class PopularSearchesResponse(BaseModel):
    success: bool
    searches: List[str]


# =============================================================================
# Helpers
# =============================================================================


def get_search_engine(db: Optional[Session] = Depends(get_optional_db)) -> SearchEngine:
    """Dependency: engine over the request's database session, if any."""
    return SearchEngine.for_session(db)


def _validate_type(type: Optional[str]) -> Optional[str]:
    if type is not None and type not in VALID_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid type: {type}. Valid types: {sorted(VALID_TYPES)}"
        )
    return type


def _require_query(query: str) -> str:
    if not query or not query.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    return query


def _validate_date_range(start: Optional[str], end: Optional[str]) -> Optional[DateRange]:
    if not (start and end):
        return None
    for value in (start, end):
        if parse_timestamp(value) is None:
            raise HTTPException(status_code=400, detail=f"Invalid ISO-8601 date: {value}")
    return DateRange(start, end)


def _to_response(result: EngineSearchResponse) -> SearchResponse:
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Search failed")

    return SearchResponse(
        success=True,
        results=[SearchResultResponse(**r.to_dict()) for r in result.results],
        total=result.total,
        query=result.query,
        source=result.source,
        search_time_ms=result.search_time_ms,
    )


def _build_filters(
    type: Optional[str],
    category: Optional[str],
    status: Optional[str],
    min_value: Optional[float],
    max_value: Optional[float],
    start_date: Optional[str],
    end_date: Optional[str],
) -> SearchFilters:
    return SearchFilters(
        type=_validate_type(type),
        category=category,
        status=status,
        min_value=min_value,
        max_value=max_value,
        # Range applies only when both bounds are given
        date_range=_validate_date_range(start_date, end_date),
    )


def _run_search(
    engine: SearchEngine,
    q: str,
    filters: SearchFilters,
    limit: Optional[int],
    offset: int,
    sort_by: SortBy,
    sort_order: SortOrder,
) -> SearchResponse:
    options = SearchOptions(
        limit=limit if limit is not None else get_settings().search_default_limit,
        offset=offset,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return _to_response(engine.search(q, filters, options))


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=SearchResponse)
async def search(
    q: str = Query(..., description="Search query"),
    type: Optional[str] = Query(None, description="Scope to asset, user, investment or all"),
    category: Optional[str] = Query(None, description="Asset type, user role or investment type"),
    status: Optional[str] = Query(None, description="Record status"),
    min_value: Optional[float] = Query(None, description="Minimum asset value / investment amount"),
    max_value: Optional[float] = Query(None, description="Maximum asset value / investment amount"),
    start_date: Optional[str] = Query(None, description="Created on or after (ISO-8601)"),
    end_date: Optional[str] = Query(None, description="Created on or before (ISO-8601)"),
    limit: Optional[int] = Query(None, ge=0, le=100, description="Results per page"),
    offset: int = Query(0, ge=0, description="Results to skip"),
    sort_by: SortBy = Query(SortBy.RELEVANCE, description="relevance, date, value or name"),
    sort_order: SortOrder = Query(SortOrder.DESC, description="asc or desc"),
    engine: SearchEngine = Depends(get_search_engine),
):
    """
    Search across assets, users and investments.

    **Examples:**
    - `/search?q=dubai` - Everything mentioning Dubai
    - `/search?q=vault&type=asset&sort_by=value` - Vault assets by value
    - `/search?q=primary&type=investment&min_value=10000` - Investments of at least $10,000
    """
    try:
        _require_query(q)
        filters = _build_filters(type, category, status, min_value, max_value, start_date, end_date)
        return _run_search(engine, q, filters, limit, offset, sort_by, sort_order)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Search API error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("", response_model=SearchResponse)
async def search_post(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_search_engine),
):
    """Search with a JSON body of ``query``, ``filters`` and ``options``."""
    try:
        _require_query(request.query)
        f = request.filters
        filters = SearchFilters(
            type=_validate_type(f.type),
            category=f.category,
            status=f.status,
            date_range=_validate_date_range(f.date_range.start, f.date_range.end) if f.date_range else None,
            min_value=f.min_value,
            max_value=f.max_value,
        )
        o = request.options
        return _run_search(engine, request.query, filters, o.limit, o.offset, o.sort_by, o.sort_order)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Search API error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


def _add_scoped_route(entity_type: EntityType):
    """Register GET /search/<kind>s pinned to one entity type."""

    @router.get(f"/{entity_type.value}s", response_model=SearchResponse, name=f"search_{entity_type.value}s")
    async def scoped_search(
        q: str = Query(..., description="Search query"),
        category: Optional[str] = Query(None),
        status: Optional[str] = Query(None),
        min_value: Optional[float] = Query(None),
        max_value: Optional[float] = Query(None),
        start_date: Optional[str] = Query(None),
        end_date: Optional[str] = Query(None),
        limit: Optional[int] = Query(None, ge=0, le=100),
        offset: int = Query(0, ge=0),
        sort_by: SortBy = Query(SortBy.RELEVANCE),
        sort_order: SortOrder = Query(SortOrder.DESC),
        engine: SearchEngine = Depends(get_search_engine),
    ):
        try:
            _require_query(q)
            filters = _build_filters(
                entity_type.value, category, status, min_value, max_value, start_date, end_date
            )
            return _run_search(engine, q, filters, limit, offset, sort_by, sort_order)

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"{entity_type.value} search API error: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    scoped_search.__doc__ = f"Search {entity_type.value} records only."
    return scoped_search


@router.get("/suggestions", response_model=SuggestionsResponse)
async def suggestions(
    q: str = Query("", description="Partial query"),
    limit: Optional[int] = Query(None, ge=1, le=50, description="Maximum suggestions to return"),
    engine: SearchEngine = Depends(get_search_engine),
):
    """
    Autocomplete terms containing the partial query.

    **Examples:**
    - `/search/suggestions?q=ship` - "shipping containers", "container shipping"
    """
    limit = limit if limit is not None else get_settings().suggestion_default_limit
    result = engine.get_search_suggestions(q, limit)
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)
    return SuggestionsResponse(success=True, suggestions=result.suggestions, query=q)


@router.get("/popular", response_model=PopularSearchesResponse)
async def popular(
    limit: Optional[int] = Query(None, ge=1, le=50, description="Number of terms"),
    engine: SearchEngine = Depends(get_search_engine),
):
    """Most popular search terms, most popular first."""
    limit = limit if limit is not None else get_settings().suggestion_default_limit
    result = engine.get_popular_searches(limit)
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error)
    return PopularSearchesResponse(success=True, searches=result.searches)


search_assets = _add_scoped_route(EntityType.ASSET)
search_users = _add_scoped_route(EntityType.USER)
search_investments = _add_scoped_route(EntityType.INVESTMENT)
