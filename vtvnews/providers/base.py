"""Common interface for news providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List

import httpx

from vtvnews.exceptions import MalformedResponseError, ProviderError
from vtvnews.http_client import request_json
from vtvnews.models import Article, FetchResult, SearchQuery

logger = logging.getLogger(__name__)


class NewsProvider(ABC):
    """
    One upstream news API behind a uniform fetch() contract.

    Subclasses describe the request (endpoint, parameters) and map the native
    payload to canonical Articles. fetch() never raises: every failure comes
    back as a FetchResult carrying the ProviderError.
    """

    name: str = "provider"

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 15.0,
        language: str = "vi",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.language = language
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Absolute search URL."""

    @abstractmethod
    def build_params(self, query: SearchQuery) -> dict[str, Any]:
        """Provider-specific query string for a search."""

    @abstractmethod
    def parse_articles(self, payload: Any) -> List[Article]:
        """
        Map the provider's native payload to canonical Articles.

        Raises:
            MalformedResponseError: If the payload does not have the expected shape
        """

    async def fetch(self, query: SearchQuery) -> FetchResult:
        if not self.configured:
            return FetchResult.failure(self.name, ProviderError(self.name, "API key not configured"))

        try:
            payload = await request_json(
                self.name,
                "GET",
                self.endpoint,
                params=self.build_params(query),
                timeout=self.timeout,
                transport=self.transport,
            )
            articles = self.parse_articles(payload)
        except ProviderError as e:
            return FetchResult.failure(self.name, e)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            return FetchResult.failure(
                self.name, MalformedResponseError(self.name, f"unexpected payload shape: {e}")
            )

        logger.info(f"{self.name} returned {len(articles)} articles for query: {query.q[:50]}")
        return FetchResult(provider=self.name, articles=articles)


def optional_str(value: Any) -> str | None:
    """Coerce an optional payload value to a stripped string or None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def article_list(payload: Any, provider: str, key: str = "articles") -> list[Any]:
    """Extract the article array from a JSON object payload."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(provider, "response is not a JSON object")
    items = payload.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedResponseError(provider, f"'{key}' is not a list")
    return items
