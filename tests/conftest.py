"""Shared fixtures and fakes for the news tests."""

import asyncio

import httpx
import pytest

from vtvnews.config import Settings
from vtvnews.models import Article, FetchResult, SearchQuery
from vtvnews.translation.base import TranslationResult, Translator


def make_article(title=None, description=None, content=None, published_at="2024-01-01T00:00:00Z", **kwargs):
    return Article(
        title=title,
        description=description,
        content=content,
        published_at=published_at,
        **kwargs,
    )


class FakeProvider:
    """Provider double returning canned articles and recording queries."""

    def __init__(self, name="fake", articles=None, error=None, delay=0.0, responder=None):
        self.name = name
        self._articles = articles or []
        self._error = error
        self.delay = delay
        self.responder = responder
        self.queries: list[SearchQuery] = []

    async def fetch(self, query: SearchQuery) -> FetchResult:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self._error is not None:
            return FetchResult.failure(self.name, self._error)
        if self.responder is not None:
            return FetchResult(provider=self.name, articles=self.responder(query))
        return FetchResult(provider=self.name, articles=[a.model_copy(deep=True) for a in self._articles])


class PrefixTranslator(Translator):
    """Translator double marking its output with a prefix."""

    name = "prefix"

    def __init__(self, prefix="[vi] ", delay=0.0):
        self.prefix = prefix
        self.delay = delay
        self.calls: list[str] = []

    async def translate(self, text: str) -> TranslationResult:
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        return TranslationResult(provider=self.name, text=f"{self.prefix}{text}")


class RecordingTransport:
    """Build an httpx.MockTransport from a handler and keep every request."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def settings():
    """Settings with both news providers configured and no .env influence."""
    return Settings(
        _env_file=None,
        news_api_key="newsapi-key",
        gnews_api_key="gnews-key",
        provider_timeout=5.0,
        request_budget_seconds=10.0,
        translation_timeout=5.0,
        translation_budget_seconds=10.0,
        degraded_mode_latch=False,
        log_json=False,
    )


@pytest.fixture
def failing_transport():
    """Every upstream call answers HTTP 500."""
    return RecordingTransport(lambda request: httpx.Response(500, text="upstream down"))
