"""FastAPI application exposing category pages and article search."""

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException

from vtvnews.config import get_settings
from vtvnews.dependencies import get_degraded_latch, get_news_service
from vtvnews.middleware.request_logging import RequestLoggingMiddleware
from vtvnews.models import Category, NewsViewModel, SearchRequest
from vtvnews.services import CATEGORIES, NewsService, get_category
from vtvnews.utils.logging import setup_logging

settings = get_settings()
setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="Vietnamese news aggregated from NewsAPI and GNews, translated to Vietnamese",
    debug=settings.debug,
)
app.add_middleware(RequestLoggingMiddleware)

NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "vtvnews",
        "version": settings.app_version,
        "providers_configured": {
            "newsapi": bool(settings.news_api_key),
            "gnews": bool(settings.gnews_api_key),
        },
        "degraded": get_degraded_latch().tripped,
    }


@app.get("/api/categories", response_model=list[Category])
async def list_categories():
    return CATEGORIES


@app.get("/api/categories/{slug}", response_model=NewsViewModel)
async def category_articles(slug: str, service: NewsServiceDep):
    """Articles for one category page, using the category's seed query."""
    category = get_category(slug)
    if category is None:
        raise HTTPException(status_code=404, detail=f"Unknown category: {slug}")
    return await service.get_category_articles(
        category.seed_query, category.active_tab, category.name
    )


@app.post("/api/search", response_model=NewsViewModel)
async def search(body: SearchRequest, service: NewsServiceDep):
    """Search form submission."""
    logger.info(f"Search request: {body.query[:80]!r}")
    return await service.search_articles(
        body.query,
        from_date=body.from_date,
        sort_by=body.sort_by,
        active_tab=body.active_tab,
        category_name=body.category_name,
    )
