"""FastAPI dependencies."""

from functools import lru_cache

import httpx

from vtvnews.config import Settings, get_settings
from vtvnews.exceptions import ConfigurationError
from vtvnews.fetcher import ArticleFetcher, DegradedModeLatch
from vtvnews.providers import GNewsProvider, MockNewsProvider, NewsApiProvider
from vtvnews.services import NewsService
from vtvnews.translation import (
    DictionaryTranslator,
    GoogleTranslator,
    LibreTranslator,
    MyMemoryTranslator,
    TranslationPipeline,
    Translator,
)


@lru_cache
def get_degraded_latch() -> DegradedModeLatch:
    """The single degraded-mode latch shared by every request in this process."""
    return DegradedModeLatch()


def build_fetcher(
    settings: Settings,
    latch: DegradedModeLatch | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ArticleFetcher:
    if settings.provider_timeout <= 0:
        raise ConfigurationError("PROVIDER_TIMEOUT must be positive")
    providers = [
        NewsApiProvider(
            api_key=settings.news_api_key,
            base_url=settings.news_api_base_url,
            timeout=settings.provider_timeout,
            language=settings.target_language,
            transport=transport,
        ),
        GNewsProvider(
            api_key=settings.gnews_api_key,
            base_url=settings.gnews_base_url,
            timeout=settings.provider_timeout,
            language=settings.target_language,
            transport=transport,
        ),
    ]
    return ArticleFetcher(
        providers,
        mock=MockNewsProvider(),
        latch=latch if settings.degraded_mode_latch else None,
        total_timeout=settings.request_budget_seconds,
    )


def build_translation_pipeline(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> TranslationPipeline:
    common = {
        "target_language": settings.target_language,
        "timeout": settings.translation_timeout,
        "transport": transport,
    }
    translators: list[Translator] = [
        GoogleTranslator(settings.google_translate_url, **common),
        MyMemoryTranslator(settings.mymemory_url, **common),
    ]
    if settings.libre_translate_url:
        translators.append(
            LibreTranslator(
                settings.libre_translate_url, api_key=settings.libre_translate_api_key, **common
            )
        )
    return TranslationPipeline(translators, DictionaryTranslator(settings.translation_glossary))


def build_news_service(
    settings: Settings,
    latch: DegradedModeLatch | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> NewsService:
    return NewsService(
        build_fetcher(settings, latch=latch, transport=transport),
        build_translation_pipeline(settings, transport=transport),
        region_keywords=settings.region_keywords,
        important_keywords=settings.important_keywords,
        region_term=settings.region_term,
        region_boost=settings.region_boost,
        page_size=settings.page_size,
        translation_concurrency=settings.translation_concurrency,
        translation_budget=settings.translation_budget_seconds,
    )


def get_news_service() -> NewsService:
    """Get a per-request news service via dependency injection."""
    return build_news_service(get_settings(), latch=get_degraded_latch())
