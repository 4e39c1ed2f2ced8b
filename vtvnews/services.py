"""Business logic services for news pages and searches."""

import asyncio
import logging
from datetime import date
from typing import List, Sequence

from vtvnews.fetcher import ArticleFetcher
from vtvnews.models import Article, Category, NewsViewModel, SortBy
from vtvnews.query_builder import boost_query, simplify_query
from vtvnews.ranking import filter_articles, rank_articles
from vtvnews.timefmt import to_vietnam_time
from vtvnews.translation.pipeline import TranslationPipeline

logger = logging.getLogger(__name__)

CATEGORIES = [
    Category(slug="home", active_tab="home", name="Trang Chủ", seed_query="Vietnam OR Việt Nam tin tức"),
    Category(slug="thoi-su", active_tab="thoisu", name="Thời Sự", seed_query="tin tức chính trị"),
    Category(slug="kinh-te", active_tab="kinhte", name="Kinh Tế", seed_query="kinh tế tài chính thương mại"),
    Category(slug="the-gioi", active_tab="thegioi", name="Thế Giới", seed_query="thế giới quốc tế"),
    Category(
        slug="the-thao", active_tab="thethao", name="Thể Thao", seed_query="thể thao bóng đá world cup olympic"
    ),
    Category(
        slug="giai-tri", active_tab="giaitri", name="Giải Trí", seed_query="giải trí nghệ sĩ điện ảnh âm nhạc"
    ),
]

CATEGORY_EMPTY_MESSAGE = "Không tìm thấy bài viết phù hợp. Vui lòng thử lại sau."
SEARCH_EMPTY_MESSAGE = "Không tìm thấy kết quả phù hợp với từ khóa tìm kiếm."
LOAD_ERROR_MESSAGE = "Đã xảy ra lỗi khi tải dữ liệu: {error}"


def get_category(slug: str) -> Category | None:
    for category in CATEGORIES:
        if category.slug == slug:
            return category
    return None


class NewsService:
    """Service assembling display-ready article lists for category pages and searches."""

    def __init__(
        self,
        fetcher: ArticleFetcher,
        translator: TranslationPipeline,
        *,
        region_keywords: Sequence[str],
        important_keywords: Sequence[str],
        region_term: str = "Vietnam",
        region_boost: bool = True,
        page_size: int = 50,
        translation_concurrency: int = 4,
        translation_budget: float | None = None,
    ):
        self.fetcher = fetcher
        self.translator = translator
        self.region_keywords = list(region_keywords)
        self.important_keywords = list(important_keywords)
        self.region_term = region_term
        self.region_boost = region_boost
        self.page_size = page_size
        self.translation_concurrency = max(1, translation_concurrency)
        self.translation_budget = translation_budget

    async def get_articles(
        self,
        query: str,
        from_date: date | None = None,
        sort_by: SortBy = SortBy.RELEVANCE,
    ) -> List[Article]:
        """Boost the query, fetch with provider fallback and rank by regional relevance."""
        expanded = boost_query(
            query, self.region_keywords, region_term=self.region_term, enabled=self.region_boost
        )
        articles = await self.fetcher.fetch(expanded, from_date, sort_by, self.page_size)
        return rank_articles(articles, self.region_keywords)

    async def get_category_articles(
        self, query: str, active_tab: str, category_name: str
    ) -> NewsViewModel:
        """Articles for a category page, ranked but not filtered."""
        view = NewsViewModel(query=query, active_tab=active_tab, category_name=category_name)
        return await self._assemble(view, filter_results=False, empty_message=CATEGORY_EMPTY_MESSAGE)

    async def search_articles(
        self,
        query: str,
        from_date: date | None = None,
        sort_by: SortBy | None = None,
        active_tab: str = "home",
        category_name: str = "Trang Chủ",
    ) -> NewsViewModel:
        """Articles for a search form submission, filtered by the query terms."""
        view = NewsViewModel(
            query=query,
            active_tab=active_tab,
            category_name=category_name,
            from_date=from_date,
            sort_by=sort_by or SortBy.RELEVANCE,
        )
        return await self._assemble(view, filter_results=True, empty_message=SEARCH_EMPTY_MESSAGE)

    async def _collect(self, view: NewsViewModel, query: str, filter_results: bool) -> List[Article]:
        articles = await self.get_articles(query, view.from_date, view.sort_by)
        if filter_results:
            articles = filter_articles(articles, query)
        return articles

    async def _assemble(
        self, view: NewsViewModel, *, filter_results: bool, empty_message: str
    ) -> NewsViewModel:
        try:
            articles = await self._collect(view, view.query, filter_results)

            if not articles:
                logger.warning(f"No articles for {view.category_name} with query: {view.query}")
                simple_query = simplify_query(view.query, self.important_keywords)
                if simple_query != view.query:
                    logger.info(f"Retrying with simplified query: {simple_query}")
                    articles = await self._collect(view, simple_query, filter_results)

                if not articles:
                    view.error_message = empty_message
                    return view

            view.articles = await self.localize(articles)
        except Exception as e:
            logger.error(f"Error loading news for {view.category_name}: {e}", exc_info=True)
            view.error_message = LOAD_ERROR_MESSAGE.format(error=e)

        return view

    async def localize(self, articles: List[Article]) -> List[Article]:
        """
        Translate titles/descriptions concurrently and convert publication times.

        At most translation_concurrency articles are translated at once. Any
        article still being translated when the translation budget runs out
        keeps its original text. The returned list keeps the input order.
        """
        semaphore = asyncio.Semaphore(self.translation_concurrency)

        async def _translate(article: Article) -> tuple[str, str]:
            async with semaphore:
                return await self.translator.translate(article.title, article.description)

        tasks = [asyncio.create_task(_translate(a)) for a in articles]
        done: set = set()
        if tasks:
            done, pending = await asyncio.wait(tasks, timeout=self.translation_budget)
            if pending:
                logger.warning(
                    f"Translation budget of {self.translation_budget}s exhausted, "
                    f"{len(pending)} articles left untranslated"
                )
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)

        for article, task in zip(articles, tasks):
            if task in done and not task.cancelled() and task.exception() is None:
                title, description = task.result()
            else:
                title, description = article.title or "", article.description or ""
            article.localize(
                translated_title=title or article.title or "",
                translated_description=description or article.description or "",
                vn_published_at=to_vietnam_time(article.published_at),
            )

        logger.info(f"Localized {len(articles)} articles")
        return articles
