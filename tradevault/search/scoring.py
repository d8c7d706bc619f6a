"""
Relevance scoring for search hits.

Scores are on a 0-100 scale and depend only on the display text and the
query, so the same record and query always rank the same way.
"""

EXACT_MATCH_SCORE = 100.0
PREFIX_MATCH_SCORE = 90.0
SUBSTRING_MATCH_SCORE = 70.0
WORD_OVERLAP_MAX_SCORE = 50.0


def relevance_score(text: str, query: str) -> float:
    """
    Score how well ``text`` matches ``query`` (case-insensitive).

    First rule that applies wins:
        exact match      -> 100
        text startswith  -> 90
        text contains    -> 70
        otherwise        -> share of query words found inside some text word, times 50

    An empty query scores 0; inclusion of records for an empty query is
    decided by the adapters, not by the score.
    """
    if not query:
        return 0.0

    text_lower = (text or "").lower()
    query_lower = query.lower()

    if text_lower == query_lower:
        return EXACT_MATCH_SCORE
    if text_lower.startswith(query_lower):
        return PREFIX_MATCH_SCORE
    if query_lower in text_lower:
        return SUBSTRING_MATCH_SCORE

    words = text_lower.split()
    query_words = query_lower.split()
    if not query_words:
        return 0.0

    matching = [q for q in query_words if any(q in word for word in words)]
    return len(matching) / len(query_words) * WORD_OVERLAP_MAX_SCORE
