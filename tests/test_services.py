"""Tests for the news service assembling category pages and searches."""

import asyncio

import pytest

from conftest import FakeProvider, PrefixTranslator, make_article
from vtvnews.config import DEFAULT_GLOSSARY, DEFAULT_IMPORTANT_KEYWORDS, DEFAULT_REGION_KEYWORDS
from vtvnews.exceptions import NewsAppError
from vtvnews.fetcher import ArticleFetcher
from vtvnews.models import SortBy
from vtvnews.services import (
    CATEGORIES,
    CATEGORY_EMPTY_MESSAGE,
    SEARCH_EMPTY_MESSAGE,
    NewsService,
    get_category,
)
from vtvnews.translation import DictionaryTranslator, Translator, TranslationPipeline, TranslationResult


class OverlapTrackingTranslator(Translator):
    """Translator that records how many calls overlap and finishes in reverse order."""

    name = "overlap"

    def __init__(self):
        self.active = 0
        self.max_active = 0

    async def translate(self, text: str) -> TranslationResult:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        # Later articles finish first
        await asyncio.sleep(0.01 * (10 - int(text.split()[-1])))
        self.active -= 1
        return TranslationResult(provider=self.name, text=f"dịch {text}")


class BrokenFetcher:
    async def fetch(self, *args, **kwargs):
        raise NewsAppError("fetcher exploded")


class CrashingFetcher:
    async def fetch(self, *args, **kwargs):
        raise RuntimeError("socket pool closed")


def make_service(providers, translators=None, **kwargs):
    pipeline = TranslationPipeline(
        translators if translators is not None else [PrefixTranslator()],
        DictionaryTranslator(DEFAULT_GLOSSARY),
    )
    fetcher = providers if not isinstance(providers, list) else ArticleFetcher(providers)
    options = {
        "region_keywords": DEFAULT_REGION_KEYWORDS,
        "important_keywords": DEFAULT_IMPORTANT_KEYWORDS,
    }
    options.update(kwargs)
    return NewsService(fetcher, pipeline, **options)


def test_category_ranks_and_localizes():
    """Test that category pages are boosted, ranked, translated and time-converted."""
    provider = FakeProvider(
        articles=[
            make_article(title="World markets", description="Stocks fall"),
            make_article(title="Vietnam GDP grows", description="Strong year", published_at="2024-01-01T00:00:00Z"),
        ]
    )
    service = make_service([provider])
    view = asyncio.run(service.get_category_articles("kinh tế tài chính", "kinhte", "Kinh Tế"))

    assert view.error_message is None
    assert view.active_tab == "kinhte"
    assert view.category_name == "Kinh Tế"
    assert provider.queries[0].q == "Vietnam kinh tế tài chính"
    assert provider.queries[0].sort_by == SortBy.RELEVANCE
    assert [a.title for a in view.articles] == ["Vietnam GDP grows", "World markets"]
    first = view.articles[0]
    assert first.translated_title == "[vi] Vietnam GDP grows"
    assert first.translated_description == "[vi] Strong year"
    assert first.vn_published_at == "2024-01-01 07:00:00 (Giờ VN)"


def test_category_never_filters():
    """Test that category pages keep articles unrelated to the seed query."""
    provider = FakeProvider(articles=[make_article(title="Unrelated headline")])
    view = asyncio.run(make_service([provider]).get_category_articles("thể thao", "thethao", "Thể Thao"))

    assert [a.title for a in view.articles] == ["Unrelated headline"]


def test_category_with_all_providers_failing_gets_mock_articles():
    """Test that a total outage still renders a non-empty page."""
    view = asyncio.run(make_service([]).get_category_articles("tin tức", "home", "Trang Chủ"))

    assert len(view.articles) == 3
    assert view.error_message is None
    assert all(a.vn_published_at for a in view.articles)


def test_search_filters_by_query_terms():
    """Test that search results are limited to articles matching the query."""
    provider = FakeProvider(
        articles=[
            make_article(title="Giá vàng tăng mạnh"),
            make_article(title="Bóng đá Việt Nam"),
        ]
    )
    view = asyncio.run(make_service([provider]).search_articles("giá vàng", sort_by=SortBy.RECENCY))

    assert [a.title for a in view.articles] == ["Giá vàng tăng mạnh"]
    assert view.sort_by == SortBy.RECENCY
    assert provider.queries[0].sort_by == SortBy.RECENCY


def test_search_retries_with_simplified_query():
    """Test the retry with a reduced query after an empty first pass."""

    def responder(query):
        if "qqqq" in query.q:
            return [make_article(title="Alpha")]
        return [make_article(title="Tin bóng đá hôm nay")]

    provider = FakeProvider(responder=responder)
    service = make_service([provider], important_keywords=["bóng"])
    view = asyncio.run(service.search_articles("bóng qqqq wwww"))

    assert [q.q for q in provider.queries] == ["Vietnam bóng qqqq wwww", "Vietnam bóng"]
    assert [a.title for a in view.articles] == ["Tin bóng đá hôm nay"]
    assert view.query == "bóng qqqq wwww"


def test_search_without_results_sets_error_message():
    """Test the soft error when even the simplified query finds nothing."""
    provider = FakeProvider(articles=[make_article(title="Alpha")])
    view = asyncio.run(make_service([provider]).search_articles("zzzz yyyy qqqq"))

    assert view.articles == []
    assert view.error_message == SEARCH_EMPTY_MESSAGE
    assert len(provider.queries) == 2


def test_unexpected_error_becomes_message():
    """Test that application errors surface as a displayable message, not an exception."""
    view = asyncio.run(make_service(BrokenFetcher()).get_category_articles("x", "home", "Trang Chủ"))

    assert view.articles == []
    assert "fetcher exploded" in view.error_message
    assert view.error_message != CATEGORY_EMPTY_MESSAGE


def test_any_exception_becomes_message():
    """Test that errors outside the application hierarchy are also reported softly."""
    view = asyncio.run(make_service(CrashingFetcher()).search_articles("giá vàng"))

    assert view.articles == []
    assert view.error_message == "Đã xảy ra lỗi khi tải dữ liệu: socket pool closed"


def test_localize_preserves_order_under_concurrency():
    """Test that concurrent translation keeps the ranked order and respects the bound."""
    articles = [make_article(title=f"Article {i}") for i in range(8)]
    tracker = OverlapTrackingTranslator()
    service = make_service([], translators=[tracker], translation_concurrency=2)
    result = asyncio.run(service.localize(articles))

    assert [a.title for a in result] == [f"Article {i}" for i in range(8)]
    assert [a.translated_title for a in result] == [f"dịch Article {i}" for i in range(8)]
    assert tracker.max_active <= 2


def test_translation_budget_keeps_original_text():
    """Test that articles not translated in time keep their original text."""
    slow = PrefixTranslator(delay=5)
    service = make_service([], translators=[slow], translation_budget=0.05)
    articles = [make_article(title="Hanoi", description="desc", published_at="2024-01-01T00:00:00Z")]
    (article,) = asyncio.run(service.localize(articles))

    assert article.translated_title == "Hanoi"
    assert article.translated_description == "desc"
    assert article.vn_published_at == "2024-01-01 07:00:00 (Giờ VN)"


def test_localize_only_once():
    """Test that derived fields cannot be overwritten within a response."""
    article = make_article(title="x")
    article.localize("a", "b", "c")
    with pytest.raises(ValueError):
        article.localize("d", "e", "f")
    assert (article.translated_title, article.translated_description, article.vn_published_at) == ("a", "b", "c")


def test_category_table():
    """Test category lookup by slug."""
    assert len(CATEGORIES) == 6
    assert get_category("kinh-te").seed_query == "kinh tế tài chính thương mại"
    assert get_category("nope") is None
