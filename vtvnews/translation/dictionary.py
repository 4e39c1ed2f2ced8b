"""Glossary substitution, the translator of last resort."""

import re
from typing import Mapping

from vtvnews.translation.base import TranslationResult, Translator


def _is_unspaced_script(ch: str) -> bool:
    """CJK ideographs and kana, written without spaces between words."""
    code = ord(ch)
    return (
        0x3040 <= code <= 0x30FF  # hiragana, katakana
        or 0x3400 <= code <= 0x4DBF  # CJK extension A
        or 0x4E00 <= code <= 0x9FFF  # CJK unified ideographs
        or 0xF900 <= code <= 0xFAFF  # CJK compatibility ideographs
    )


def _term_pattern(term: str) -> str:
    escaped = re.escape(term)
    if _is_unspaced_script(term[0]):
        return escaped
    return rf"(?<!\w){escaped}(?!\w)"


class DictionaryTranslator(Translator):
    """
    Replace glossary terms in place, leaving all other text verbatim.

    Matching is case-insensitive and limited to whole tokens, so "oil" does
    not touch "soil". All terms are replaced in a single pass with longer
    terms tried first, which keeps "Ho Chi Minh City" intact and never
    re-translates text that was just substituted.
    """

    name = "dictionary"

    def __init__(self, glossary: Mapping[str, str]):
        self.glossary = {k.lower(): v for k, v in glossary.items() if k}
        terms = sorted((k for k in glossary if k), key=len, reverse=True)
        self._pattern = (
            re.compile("|".join(_term_pattern(t) for t in terms), re.IGNORECASE) if terms else None
        )

    def substitute(self, text: str) -> str:
        if not text or self._pattern is None:
            return text
        return self._pattern.sub(lambda m: self.glossary.get(m.group(0).lower(), m.group(0)), text)

    async def translate(self, text: str) -> TranslationResult:
        return TranslationResult(provider=self.name, text=self.substitute(text))
