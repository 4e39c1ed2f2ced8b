"""NewsAPI.org provider (primary)."""

from typing import Any, List

from vtvnews.exceptions import MalformedResponseError
from vtvnews.models import Article, ArticleSource, SearchQuery, SortBy
from vtvnews.providers.base import NewsProvider, article_list, optional_str

SORT_VALUES = {
    SortBy.RELEVANCE: "relevancy",
    SortBy.POPULARITY: "popularity",
    SortBy.RECENCY: "publishedAt",
}


class NewsApiProvider(NewsProvider):
    """Search the NewsAPI /everything endpoint."""

    name = "newsapi"

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/everything"

    def build_params(self, query: SearchQuery) -> dict[str, Any]:
        params: dict[str, Any] = {
            "q": query.q,
            "apiKey": self.api_key,
            "pageSize": max(1, min(query.page_size, 100)),
            "language": self.language,
            "sortBy": SORT_VALUES[query.sort_by],
        }
        if query.from_date:
            params["from"] = query.from_date.isoformat()
        return params

    def parse_articles(self, payload: Any) -> List[Article]:
        if not isinstance(payload, dict):
            raise MalformedResponseError(self.name, "response is not a JSON object")
        if payload.get("status") != "ok":
            message = payload.get("message") or "unknown error"
            raise MalformedResponseError(self.name, f"API status {payload.get('status')!r}: {message}")

        articles = []
        for item in article_list(payload, self.name):
            if not isinstance(item, dict):
                continue
            source = item.get("source")
            articles.append(
                Article(
                    source=_source(source) if isinstance(source, dict) else None,
                    author=optional_str(item.get("author")),
                    title=optional_str(item.get("title")),
                    description=optional_str(item.get("description")),
                    url=optional_str(item.get("url")),
                    url_to_image=optional_str(item.get("urlToImage")),
                    published_at=optional_str(item.get("publishedAt")),
                    content=optional_str(item.get("content")),
                )
            )
        return articles


def _source(data: dict[str, Any]) -> ArticleSource:
    return ArticleSource(id=optional_str(data.get("id")), name=optional_str(data.get("name")))
