"""Tests for the provider fallback chain and degraded mode."""

import asyncio
import threading

import httpx

from conftest import FakeProvider, RecordingTransport, make_article
from vtvnews.dependencies import build_fetcher
from vtvnews.exceptions import TransientProviderError
from vtvnews.fetcher import ArticleFetcher, DegradedModeLatch
from vtvnews.providers.mock import MOCK_ARTICLES

MOCK_TITLES = [a["title"] for a in MOCK_ARTICLES]


def test_all_providers_http_500_returns_mock_set(settings, failing_transport):
    """Test that total provider failure degrades to the fixed three mock articles."""
    fetcher = build_fetcher(settings, transport=failing_transport.transport)
    articles = asyncio.run(fetcher.fetch("kinh tế"))

    assert [a.title for a in articles] == MOCK_TITLES
    assert len(articles) == 3
    assert failing_transport.hosts() == ["newsapi.org", "gnews.io"]


def test_falls_back_to_secondary_provider(settings):
    """Test that a primary failure advances to the secondary provider."""

    def handler(request):
        if request.url.host == "newsapi.org":
            return httpx.Response(500)
        return httpx.Response(
            200,
            json={"articles": [{"title": "Tin từ GNews", "publishedAt": "2024-01-01T00:00:00Z"}]},
        )

    recorder = RecordingTransport(handler)
    fetcher = build_fetcher(settings, transport=recorder.transport)
    articles = asyncio.run(fetcher.fetch("Vietnam"))

    assert [a.title for a in articles] == ["Tin từ GNews"]


def test_stops_at_first_success():
    """Test that later providers are not called after a success."""
    primary = FakeProvider("primary", articles=[make_article(title="A")])
    secondary = FakeProvider("secondary", articles=[make_article(title="B")])
    articles = asyncio.run(ArticleFetcher([primary, secondary]).fetch("q"))

    assert [a.title for a in articles] == ["A"]
    assert secondary.queries == []


def test_empty_result_advances_to_next_provider():
    """Test that a successful but empty answer is not usable."""
    empty = FakeProvider("empty", articles=[])
    full = FakeProvider("full", articles=[make_article(title="B")])
    articles = asyncio.run(ArticleFetcher([empty, full]).fetch("q"))

    assert [a.title for a in articles] == ["B"]


def test_never_empty_without_providers():
    """Test that a fetcher with no providers still returns mock data."""
    articles = asyncio.run(ArticleFetcher([]).fetch(""))
    assert len(articles) == 3


def test_overall_deadline_serves_mock():
    """Test that a hung provider is abandoned once the budget is spent."""
    slow = FakeProvider("slow", articles=[make_article(title="late")], delay=5)
    fetcher = ArticleFetcher([slow], total_timeout=0.05)
    articles = asyncio.run(fetcher.fetch("q"))

    assert [a.title for a in articles] == MOCK_TITLES


def test_mock_articles_are_fresh_per_call():
    """Test that enriching one response's mock articles does not leak into the next."""
    fetcher = ArticleFetcher([])
    first = asyncio.run(fetcher.fetch("q"))
    first[0].localize("x", "y", "z")
    second = asyncio.run(fetcher.fetch("q"))

    assert second[0].translated_title is None


def test_latch_off_by_default_retries_network(settings, failing_transport):
    """Test that without the latch every request tries the providers again."""
    fetcher = build_fetcher(settings, latch=DegradedModeLatch(), transport=failing_transport.transport)
    asyncio.run(fetcher.fetch("a"))
    asyncio.run(fetcher.fetch("b"))

    assert len(failing_transport.requests) == 4


def test_latch_skips_network_after_exhaustion(settings, failing_transport):
    """Test degraded mode: after one exhaustion, providers are skipped until reset."""
    latch = DegradedModeLatch()
    settings.degraded_mode_latch = True
    fetcher = build_fetcher(settings, latch=latch, transport=failing_transport.transport)

    asyncio.run(fetcher.fetch("a"))
    assert latch.tripped
    assert len(failing_transport.requests) == 2

    articles = asyncio.run(fetcher.fetch("b"))
    assert len(articles) == 3
    assert len(failing_transport.requests) == 2

    latch.reset()
    asyncio.run(fetcher.fetch("c"))
    assert len(failing_transport.requests) == 4


def test_latch_trip_is_atomic():
    """Test that exactly one of many racing callers flips the latch."""
    latch = DegradedModeLatch()
    winners = []
    barrier = threading.Barrier(8)

    def race():
        barrier.wait()
        winners.append(latch.trip())

    threads = [threading.Thread(target=race) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert winners.count(True) == 1
    assert latch.tripped


def test_failed_provider_error_is_recorded():
    """Test that a failing provider does not prevent the next one from answering."""
    broken = FakeProvider("broken", error=TransientProviderError("broken", "timeout"))
    good = FakeProvider("good", articles=[make_article(title="ok")])
    articles = asyncio.run(ArticleFetcher([broken, good]).fetch("q"))

    assert [a.title for a in articles] == ["ok"]
    assert len(broken.queries) == 1
