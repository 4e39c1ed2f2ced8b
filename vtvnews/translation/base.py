"""Common interface for translators."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from vtvnews.exceptions import MalformedResponseError, ProviderError

logger = logging.getLogger(__name__)


@dataclass
class TranslationResult:
    """Outcome of one translation attempt."""

    provider: str
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text and self.text.strip())


class Translator(ABC):
    """One translation strategy with a uniform (text) -> TranslationResult signature."""

    name: str = "translator"

    @abstractmethod
    async def translate(self, text: str) -> TranslationResult:
        """Translate text into the target language. Must not raise."""


class RemoteTranslator(Translator):
    """
    Translator backed by an HTTP API.

    Subclasses implement _request() and leave error handling to translate():
    network errors, non-success statuses, unparseable payloads and empty
    results all become failed TranslationResults.
    """

    max_chars: int = 1000

    def __init__(
        self,
        url: str,
        target_language: str = "vi",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.target_language = target_language
        self.timeout = timeout
        self.transport = transport

    def truncate(self, text: str) -> str:
        return text[: self.max_chars]

    @abstractmethod
    async def _request(self, text: str) -> str:
        """Call the API and return the translated text."""

    async def translate(self, text: str) -> TranslationResult:
        try:
            translated = await self._request(self.truncate(text))
        except ProviderError as e:
            logger.warning(f"{self.name} translation failed: {e}")
            return TranslationResult(provider=self.name, error=str(e))
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logger.warning(f"{self.name} returned an unexpected payload: {e}")
            return TranslationResult(provider=self.name, error=f"unexpected payload: {e}")

        if not translated or not translated.strip():
            logger.warning(f"{self.name} returned an empty translation")
            return TranslationResult(provider=self.name, error="empty translation")
        return TranslationResult(provider=self.name, text=translated)


def nested_text(payload: Any, provider: str, *keys: str) -> str:
    """Walk nested JSON objects and return the string at the end of the path."""
    cur = payload
    for k in keys:
        if not isinstance(cur, dict) or k not in cur:
            raise MalformedResponseError(provider, f"missing field {'.'.join(keys)}")
        cur = cur[k]
    if not isinstance(cur, str):
        raise MalformedResponseError(provider, f"field {'.'.join(keys)} is not text")
    return cur
