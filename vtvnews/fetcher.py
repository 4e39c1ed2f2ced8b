"""Article fetching across news providers with ordered fallback."""

import asyncio
import logging
import threading
from datetime import date
from typing import List, Sequence

from vtvnews.exceptions import ProviderError, TotalExhaustionError, TransientProviderError
from vtvnews.models import Article, SearchQuery, SortBy
from vtvnews.providers.base import NewsProvider
from vtvnews.providers.mock import MockNewsProvider

logger = logging.getLogger(__name__)


class DegradedModeLatch:
    """
    Process-wide flag recording that every real provider has failed.

    Once tripped, fetchers sharing the latch serve mock data without touching
    the network until reset() is called.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tripped = False

    @property
    def tripped(self) -> bool:
        with self._lock:
            return self._tripped

    def trip(self) -> bool:
        """Set the latch. Returns True only for the caller that flipped it."""
        with self._lock:
            if self._tripped:
                return False
            self._tripped = True
            return True

    def reset(self) -> None:
        with self._lock:
            self._tripped = False


class ArticleFetcher:
    """
    Query providers in order and return the first usable article list.

    A provider is usable when it answers successfully with at least one
    article. When the chain is exhausted (or the overall deadline passes) the
    mock provider's fixed set is returned, so fetch() never fails and never
    returns an empty list.
    """

    def __init__(
        self,
        providers: Sequence[NewsProvider],
        mock: MockNewsProvider | None = None,
        latch: DegradedModeLatch | None = None,
        total_timeout: float | None = None,
    ):
        self.providers = list(providers)
        self.mock = mock or MockNewsProvider()
        self.latch = latch
        self.total_timeout = total_timeout

    @property
    def degraded(self) -> bool:
        return bool(self.latch and self.latch.tripped)

    async def fetch(
        self,
        query: str,
        from_date: date | None = None,
        sort_by: SortBy = SortBy.RELEVANCE,
        page_size: int = 50,
    ) -> List[Article]:
        """
        Fetch articles for a query.

        Args:
            query: Search query (already boosted if desired)
            from_date: Only articles published on or after this date
            sort_by: Sort order, mapped per provider
            page_size: Upper bound on articles requested

        Returns:
            Canonical articles from the first usable provider, or mock articles
        """
        if self.degraded:
            logger.info("Degraded mode active, serving mock articles")
            return self.mock.articles()

        search = SearchQuery(q=query, from_date=from_date, sort_by=sort_by, page_size=page_size)

        try:
            if self.total_timeout:
                return await asyncio.wait_for(self._fetch_chain(search), timeout=self.total_timeout)
            return await self._fetch_chain(search)
        except TotalExhaustionError as e:
            logger.warning(f"{e}; serving mock articles")
        except asyncio.TimeoutError:
            logger.warning(
                f"News providers exceeded {self.total_timeout}s for query: {query[:50]}; "
                "serving mock articles"
            )

        if self.latch is not None and self.latch.trip():
            logger.warning("Entering degraded mode: real providers will be skipped")
        return self.mock.articles()

    async def _fetch_chain(self, search: SearchQuery) -> List[Article]:
        errors: list[ProviderError] = []
        for provider in self.providers:
            result = await provider.fetch(search)
            if not result.ok:
                logger.warning(f"Provider {provider.name} failed: {result.error}")
                errors.append(result.error)
                continue
            if not result.articles:
                logger.warning(f"Provider {provider.name} returned no articles for: {search.q[:50]}")
                errors.append(TransientProviderError(provider.name, "no articles returned"))
                continue
            return result.articles
        raise TotalExhaustionError(errors)
