"""
Autocomplete suggestions and popular search terms.

Both lists are static and read-only; they are loaded once with the module.
"""

from typing import List

SUGGESTION_VOCABULARY = (
    "shipping containers",
    "real estate properties",
    "trade tokens",
    "vault storage",
    "UAE logistics",
    "blockchain assets",
    "high yield investments",
    "low risk assets",
    "tokenized real estate",
    "container shipping",
    "logistics assets",
    "investment opportunities",
    "asset management",
    "portfolio diversification",
)

# Ordered most popular first
POPULAR_SEARCHES = (
    "shipping containers",
    "real estate",
    "trade tokens",
    "vault storage",
    "high yield",
    "low risk",
    "UAE properties",
    "logistics assets",
    "blockchain",
    "tokenized assets",
)


def get_suggestions(query: str, limit: int = 10) -> List[str]:
    """Vocabulary terms containing ``query`` (case-insensitive), in vocabulary order."""
    query_lower = (query or "").lower()
    matches = [term for term in SUGGESTION_VOCABULARY if query_lower in term.lower()]
    return matches[:max(limit, 0)]


def get_popular_searches(limit: int = 10) -> List[str]:
    return list(POPULAR_SEARCHES[:max(limit, 0)])
