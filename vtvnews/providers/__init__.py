"""News providers."""

from .base import NewsProvider
from .gnews import GNewsProvider
from .mock import MockNewsProvider
from .newsapi import NewsApiProvider

__all__ = [
    "NewsProvider",
    "NewsApiProvider",
    "GNewsProvider",
    "MockNewsProvider",
]
