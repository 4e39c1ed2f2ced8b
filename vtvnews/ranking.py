"""Keyword matching, relevance ranking and keyword filtering of articles."""

import logging
import unicodedata
from typing import Iterable, List, Sequence

from vtvnews.models import Article

logger = logging.getLogger(__name__)

# Field weights for relevance scoring
TITLE_WEIGHT = 3
DESCRIPTION_WEIGHT = 2
CONTENT_WEIGHT = 1

MIN_FILTER_TOKEN_LENGTH = 3

# Shorter keywords keep their diacritics when matched ("hue" must not hit "thuê")
MIN_FOLDED_KEYWORD_LENGTH = 4


def fold_text(text: str | None) -> str:
    """Lower-case and strip Vietnamese diacritics ("Hà Nội" -> "ha noi")."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.replace("đ", "d")


def contains_any(text: str | None, keywords: Iterable[str]) -> bool:
    """
    True if any keyword occurs in text as a substring.

    Case never matters. Diacritics are ignored for keywords of at least
    MIN_FOLDED_KEYWORD_LENGTH characters; shorter ones must match exactly.
    """
    if not text:
        return False
    lowered = text.lower()
    folded = fold_text(text)
    for keyword in keywords:
        if not keyword:
            continue
        if len(keyword) < MIN_FOLDED_KEYWORD_LENGTH:
            if keyword.lower() in lowered:
                return True
        elif fold_text(keyword) in folded:
            return True
    return False


def _count_hits(text: str, keywords: Sequence[str]) -> int:
    return sum(1 for k in keywords if k in text)


def score_article(article: Article, keywords: Sequence[str]) -> int:
    """
    Relevance score of an article for a keyword set.

    Each keyword found in the title adds 3, in the description 2, in the
    content 1. Matching is case-insensitive substring search.
    """
    lowered = [k.lower() for k in keywords if k]
    title = (article.title or "").lower()
    description = (article.description or "").lower()
    content = (article.content or "").lower()
    return (
        TITLE_WEIGHT * _count_hits(title, lowered)
        + DESCRIPTION_WEIGHT * _count_hits(description, lowered)
        + CONTENT_WEIGHT * _count_hits(content, lowered)
    )


def rank_articles(articles: Sequence[Article], keywords: Sequence[str]) -> List[Article]:
    """
    Order articles by descending relevance score.

    Nothing is dropped; equal scores keep their input order.
    """
    scored = [(score_article(a, keywords), a) for a in articles]
    # sorted() is stable, so ties keep their original order
    ranked = [a for _, a in sorted(scored, key=lambda pair: pair[0], reverse=True)]
    logger.info(f"Ranked {len(ranked)} articles by regional relevance")
    return ranked


def filter_tokens(term: str | None) -> List[str]:
    """Lower-cased whitespace tokens of a filter term, minus the short ones."""
    if not term:
        return []
    return [t for t in term.lower().split() if len(t) >= MIN_FILTER_TOKEN_LENGTH]


def filter_articles(articles: Sequence[Article], term: str | None) -> List[Article]:
    """
    Keep articles matching at least one token of the filter term.

    A token matches when it is a substring of the lower-cased title,
    description or content. A blank term (or one with only short tokens)
    disables filtering.
    """
    tokens = filter_tokens(term)
    if not tokens:
        return list(articles)

    kept = []
    for article in articles:
        haystacks = [
            (article.title or "").lower(),
            (article.description or "").lower(),
            (article.content or "").lower(),
        ]
        if any(tok in hay for tok in tokens for hay in haystacks):
            kept.append(article)

    logger.debug(f"Keyword filter kept {len(kept)}/{len(articles)} articles for {tokens}")
    return kept
