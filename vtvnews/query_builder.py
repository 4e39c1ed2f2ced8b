"""Query expansion and simplification for news searches."""

from typing import Sequence

from vtvnews.ranking import contains_any

MIN_IMPORTANT_TOKEN_LENGTH = 2


def boost_query(
    query: str,
    region_keywords: Sequence[str],
    region_term: str = "Vietnam",
    enabled: bool = True,
) -> str:
    """
    Prepend the region term to a query that does not already mention the region.

    The region check uses contains_any, so "ha noi" counts as "Hà Nội" while
    "thuê" does not count as "hue".

    Args:
        query: Raw user or category query
        region_keywords: Terms that already mark the query as regional
        region_term: Canonical term to prepend
        enabled: When False the query is returned untouched

    Returns:
        The boosted query, or the original one
    """
    if not enabled:
        return query
    if contains_any(query, region_keywords):
        return query
    if not query or not query.strip():
        return region_term
    return f"{region_term} {query}"


def simplify_query(query: str, important_keywords: Sequence[str]) -> str:
    """
    Reduce a query to at most two tokens for a retry after an empty result.

    A token is important when it contains one of the important phrases as a
    substring and is at least two characters long. Important tokens are
    preferred; otherwise the first two tokens are kept. Queries of two tokens
    or fewer are returned unchanged.
    """
    if not query or not query.strip():
        return query

    words = query.split()
    if len(words) <= 2:
        return query

    phrases = [k.lower() for k in important_keywords if k]
    important = [w for w in words if _is_important(w.lower(), phrases)][:2]
    if not important:
        return " ".join(words[:2])
    return " ".join(important)


def _is_important(word: str, phrases: Sequence[str]) -> bool:
    if len(word) < MIN_IMPORTANT_TOKEN_LENGTH:
        return False
    return any(p in word for p in phrases)
