"""
Cross-entity search engine for TradeVault.

Searches assets, users and investments with free-text matching, structured
filters and relevance ranking. The database is tried first; if it is not
configured or a fetch fails, the same pipeline runs over the built-in
in-memory catalogue.
"""

import time
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from tradevault.core.config import get_settings
from tradevault.search.adapters import (
    search_assets_in_data,
    search_investments_in_data,
    search_users_in_data,
)
from tradevault.search.ranking import merge_results, sort_and_paginate
from tradevault.search.sources import DatabaseDataSource, InMemoryDataSource, SearchDataSource
from tradevault.search.suggestions import get_popular_searches, get_suggestions
from tradevault.search.types import (
    EntityType,
    PopularSearchesResponse,
    SearchFilters,
    SearchOptions,
    SearchResponse,
    SearchResult,
    SuggestionsResponse,
)

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Unified search over the asset catalog, user directory and investment ledger.

    Features:
    - Case-insensitive substring matching over each kind's searchable fields
    - Category, status, value range and date range filters
    - 0-100 relevance scores, stable sort by relevance/date/value/name
    - Database-first with in-memory fallback, never raises to the caller
    - Autocomplete suggestions and popular terms
    """

    def __init__(
        self,
        primary: Optional[SearchDataSource] = None,
        fallback: Optional[SearchDataSource] = None,
        use_database: bool = True,
    ):
        self.primary = primary
        self.fallback = fallback if fallback is not None else InMemoryDataSource.default()
        self.use_database = use_database

    @classmethod
    def for_session(cls, db: Optional[Session]) -> "SearchEngine":
        """Engine reading from ``db`` when given, else from the fallback catalogue only."""
        settings = get_settings()
        primary = DatabaseDataSource(db) if db is not None else None
        return cls(primary=primary, use_database=settings.search_use_database)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        options: Optional[SearchOptions] = None,
    ) -> SearchResponse:
        """
        Search all entity kinds in scope.

        Args:
            query: Free text; empty matches every record that passes the filters
            filters: Structured constraints (type scope, category, status, ranges)
            options: Paging and ordering

        Returns:
            SearchResponse with one page of results and the pre-paging total.
            ``success`` is False only if both the database and the fallback fail.
        """
        start_time = time.time()
        query = query or ""
        filters = filters or SearchFilters()
        options = options or SearchOptions()

        try:
            response = None
            if self.primary is not None and self.use_database:
                response = self._search_primary(query, filters, options)
            if response is None:
                response = self._search_fallback(query, filters, options)
        except Exception as e:
            logger.error(f"Search error: {e}", exc_info=True)
            return SearchResponse(success=False, error="Search failed", query=query)

        if response.success:
            response.search_time_ms = round((time.time() - start_time) * 1000, 2)
        return response

    def search_assets(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        options: Optional[SearchOptions] = None,
    ) -> SearchResponse:
        return self.search(query, (filters or SearchFilters()).scoped_to(EntityType.ASSET), options)

    def search_users(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        options: Optional[SearchOptions] = None,
    ) -> SearchResponse:
        return self.search(query, (filters or SearchFilters()).scoped_to(EntityType.USER), options)

    def search_investments(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        options: Optional[SearchOptions] = None,
    ) -> SearchResponse:
        return self.search(query, (filters or SearchFilters()).scoped_to(EntityType.INVESTMENT), options)

    def _search_primary(
        self, query: str, filters: SearchFilters, options: SearchOptions
    ) -> Optional[SearchResponse]:
        """Run against the database; None means fall back."""
        try:
            matches = self._collect(self.primary, query, filters)
        except Exception as e:
            logger.warning(f"Database search failed, using fallback data: {e}")
            return None

        if matches is None:
            logger.warning("Database fetch unsuccessful, using fallback data")
            return None
        return self._respond(matches, query, options, self.primary.name)

    def _search_fallback(
        self, query: str, filters: SearchFilters, options: SearchOptions
    ) -> SearchResponse:
        matches = self._collect(self.fallback, query, filters)
        if matches is None:
            logger.error("Fallback data source returned no data")
            return SearchResponse(success=False, error="Search failed", query=query)
        return self._respond(matches, query, options, self.fallback.name)

    def _collect(
        self, source: SearchDataSource, query: str, filters: SearchFilters
    ) -> Optional[List[SearchResult]]:
        """
        Fetch every kind in scope and run its adapter.

        Returns the merged matches (assets, users, investments order), or
        None if any fetch reports failure.
        """
        steps: Sequence[Tuple[EntityType, Callable, Callable]] = (
            (EntityType.ASSET, source.fetch_assets, search_assets_in_data),
            (EntityType.USER, source.fetch_users, search_users_in_data),
            (EntityType.INVESTMENT, source.fetch_investments, search_investments_in_data),
        )

        groups = []
        for entity_type, fetch, adapter in steps:
            if not filters.includes(entity_type):
                continue
            fetched = fetch()
            if not fetched.success:
                logger.warning(
                    f"{source.name} fetch of {entity_type.value} records failed: {fetched.error}"
                )
                return None
            groups.append(adapter(fetched.items, query, filters))

        return merge_results(*groups)

    def _respond(
        self, matches: List[SearchResult], query: str, options: SearchOptions, source_name: str
    ) -> SearchResponse:
        page = sort_and_paginate(matches, options)
        logger.debug(
            f"Search {query!r} via {source_name}: {len(matches)} matches, "
            f"returning {len(page)} from offset {options.offset}"
        )
        return SearchResponse(
            success=True,
            results=page,
            total=len(matches),
            source=source_name,
            query=query,
        )

    # -------------------------------------------------------------------------
    # Suggestions
    # -------------------------------------------------------------------------

    def get_search_suggestions(self, query: str, limit: int = 10) -> SuggestionsResponse:
        """Autocomplete terms containing ``query``."""
        try:
            return SuggestionsResponse(success=True, suggestions=get_suggestions(query, limit))
        except Exception as e:
            logger.error(f"Get search suggestions error: {e}", exc_info=True)
            return SuggestionsResponse(success=False, error="Failed to get suggestions")

    def get_popular_searches(self, limit: int = 10) -> PopularSearchesResponse:
        """The ``limit`` most popular search terms."""
        try:
            return PopularSearchesResponse(success=True, searches=get_popular_searches(limit))
        except Exception as e:
            logger.error(f"Get popular searches error: {e}", exc_info=True)
            return PopularSearchesResponse(success=False, error="Failed to get popular searches")
