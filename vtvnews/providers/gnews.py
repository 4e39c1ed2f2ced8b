"""GNews provider (secondary)."""

from typing import Any, List

from vtvnews.exceptions import MalformedResponseError
from vtvnews.models import Article, ArticleSource, SearchQuery, SortBy
from vtvnews.providers.base import NewsProvider, article_list, optional_str

# GNews has no popularity ordering
SORT_VALUES = {
    SortBy.RELEVANCE: "relevance",
    SortBy.POPULARITY: "relevance",
    SortBy.RECENCY: "publishedAt",
}


class GNewsProvider(NewsProvider):
    """Search the GNews /search endpoint."""

    name = "gnews"

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/search"

    def build_params(self, query: SearchQuery) -> dict[str, Any]:
        params: dict[str, Any] = {
            "q": query.q,
            "apikey": self.api_key,
            "lang": self.language,
            "max": max(1, min(query.page_size, 100)),
            "sortby": SORT_VALUES[query.sort_by],
        }
        if query.from_date:
            params["from"] = f"{query.from_date.isoformat()}T00:00:00Z"
        return params

    def parse_articles(self, payload: Any) -> List[Article]:
        if isinstance(payload, dict) and payload.get("errors"):
            raise MalformedResponseError(self.name, f"API errors: {payload['errors']}")

        articles = []
        for item in article_list(payload, self.name):
            if not isinstance(item, dict):
                continue
            source = item.get("source")
            # GNews has no author or source id; those stay empty
            articles.append(
                Article(
                    source=ArticleSource(name=optional_str(source.get("name")))
                    if isinstance(source, dict)
                    else None,
                    title=optional_str(item.get("title")),
                    description=optional_str(item.get("description")),
                    url=optional_str(item.get("url")),
                    url_to_image=optional_str(item.get("image")),
                    published_at=optional_str(item.get("publishedAt")),
                    content=optional_str(item.get("content")),
                )
            )
        return articles
