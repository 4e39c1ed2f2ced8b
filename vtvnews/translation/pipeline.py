"""Translation with ordered provider fallback."""

import asyncio
import logging
from typing import Sequence

from vtvnews.translation.base import Translator
from vtvnews.translation.dictionary import DictionaryTranslator

logger = logging.getLogger(__name__)


class TranslationPipeline:
    """
    First successful translator wins; the dictionary always answers last.

    translate() and translate_text() never raise. Blank input yields an empty
    string without calling any translator, and an unexpected error returns
    the original text for that field.
    """

    def __init__(self, translators: Sequence[Translator], fallback: DictionaryTranslator):
        self.translators = list(translators)
        self.fallback = fallback

    async def translate_text(self, text: str | None) -> str:
        if not text or not text.strip():
            return ""
        try:
            return await self._first_success(text)
        except Exception as e:
            logger.error(f"Translation failed, keeping original text: {e}", exc_info=True)
            return text

    async def _first_success(self, text: str) -> str:
        for translator in self.translators:
            result = await translator.translate(text)
            if result.ok:
                logger.debug(f"{translator.name} translated {text[:40]!r} -> {result.text[:40]!r}")
                return result.text
            logger.info(f"{translator.name} could not translate ({result.error}), trying next")

        logger.warning("Remote translators failed, using dictionary fallback")
        result = await self.fallback.translate(text)
        return result.text or text

    async def translate(self, title: str | None, description: str | None) -> tuple[str, str]:
        """Translate an article's title and description."""
        translated_title, translated_description = await asyncio.gather(
            self.translate_text(title),
            self.translate_text(description),
        )
        return translated_title, translated_description
