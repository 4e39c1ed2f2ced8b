"""Pydantic models for data structures."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from vtvnews.exceptions import ProviderError


class SortBy(str, Enum):
    """Provider-independent sort modes."""

    RELEVANCE = "relevance"
    POPULARITY = "popularity"
    RECENCY = "recency"


class ArticleSource(BaseModel):
    """Publisher of an article."""

    id: str | None = None
    name: str | None = None


class Article(BaseModel):
    """Canonical article, independent of the provider it came from."""

    source: ArticleSource | None = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = None
    published_at: str | None = None  # ISO-8601 as delivered upstream
    content: str | None = None

    # Filled once during response assembly
    translated_title: str | None = None
    translated_description: str | None = None
    vn_published_at: str | None = None

    @property
    def is_localized(self) -> bool:
        return self.vn_published_at is not None

    def localize(self, translated_title: str, translated_description: str, vn_published_at: str) -> None:
        """Attach translated text and local time. Allowed only once per article."""
        if self.is_localized:
            raise ValueError("Article has already been localized")
        self.translated_title = translated_title
        self.translated_description = translated_description
        self.vn_published_at = vn_published_at


class SearchQuery(BaseModel):
    """Parameters for a single news fetch."""

    q: str = Field(default="", description="Free-text query")
    from_date: date | None = Field(default=None, description="Oldest publication date")
    sort_by: SortBy = Field(default=SortBy.RELEVANCE, description="Sort order")
    page_size: int = Field(
        default=50, ge=1, le=100, description="Upper bound on articles requested from a provider"
    )


@dataclass
class FetchResult:
    """Outcome of one provider attempt: articles on success, the error otherwise."""

    provider: str
    articles: list[Article] = field(default_factory=list)
    error: ProviderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, provider: str, error: ProviderError) -> "FetchResult":
        return cls(provider=provider, error=error)


class Category(BaseModel):
    """A news category page and its default query."""

    slug: str
    active_tab: str
    name: str
    seed_query: str


class SearchRequest(BaseModel):
    """Search form submission."""

    query: str = Field(default="", description="Search query string")
    from_date: date | None = Field(default=None, description="Only articles published since")
    sort_by: SortBy | None = Field(default=None, description="Sort order")
    active_tab: str = Field(default="home")
    category_name: str = Field(default="Trang Chủ")


class NewsViewModel(BaseModel):
    """Display-ready result handed back to the web layer."""

    articles: list[Article] = Field(default_factory=list)
    error_message: str | None = None
    query: str = ""
    active_tab: str = "home"
    category_name: str = "Trang Chủ"
    from_date: date | None = None
    sort_by: SortBy = SortBy.RELEVANCE
