"""
Cross-entity search engine for TradeVault.

Provides unified search across assets, users and investments with
structured filters, relevance ranking, pagination and autocomplete.
"""

from tradevault.search.engine import SearchEngine
from tradevault.search.types import EntityType, SearchFilters, SearchOptions

__all__ = ["SearchEngine", "EntityType", "SearchFilters", "SearchOptions"]
