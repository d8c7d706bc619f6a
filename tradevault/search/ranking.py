"""
Merge, sort and paginate search results.

Sorting is stable: hits with equal keys keep the order they had after
merging (assets, then users, then investments, each in source order).
"""

import logging
from typing import Callable, Dict, Iterable, List

from tradevault.search.parsing import timestamp_or_zero
from tradevault.search.types import SearchOptions, SearchResult, SortBy, SortOrder

logger = logging.getLogger(__name__)

_SORT_KEYS: Dict[SortBy, Callable[[SearchResult], object]] = {
    SortBy.RELEVANCE: lambda r: r.relevance_score,
    SortBy.DATE: lambda r: timestamp_or_zero(r.created_at),
    SortBy.NAME: lambda r: r.title.casefold(),
    SortBy.VALUE: lambda r: r.metadata.sort_value,
}


def merge_results(*groups: Iterable[SearchResult]) -> List[SearchResult]:
    """
    Concatenate adapter outputs, keeping the first hit for each (type, id).
    """
    merged = []
    seen = set()
    for group in groups:
        for result in group:
            if result.key in seen:
                logger.debug(f"Dropping duplicate {result.type.value} result {result.id}")
                continue
            seen.add(result.key)
            merged.append(result)
    return merged


def sort_results(
    results: List[SearchResult],
    sort_by: SortBy = SortBy.RELEVANCE,
    sort_order: SortOrder = SortOrder.DESC,
) -> List[SearchResult]:
    """Return a new list sorted by ``sort_by``; the input is left untouched."""
    # sorted() with reverse=True still keeps equal keys in input order
    return sorted(
        results,
        key=_SORT_KEYS[SortBy(sort_by)],
        reverse=SortOrder(sort_order) == SortOrder.DESC,
    )


def paginate(results: List[SearchResult], limit: int, offset: int = 0) -> List[SearchResult]:
    """Slice one page. Negative limit or offset is treated as 0."""
    limit = max(limit, 0)
    offset = max(offset, 0)
    return results[offset:offset + limit]


def sort_and_paginate(results: List[SearchResult], options: SearchOptions) -> List[SearchResult]:
    ordered = sort_results(results, options.sort_by, options.sort_order)
    return paginate(ordered, options.limit, options.offset)
