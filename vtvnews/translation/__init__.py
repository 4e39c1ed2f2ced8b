"""Translation providers and the fallback pipeline."""

from .base import RemoteTranslator, TranslationResult, Translator
from .dictionary import DictionaryTranslator
from .google import GoogleTranslator
from .libre import LibreTranslator
from .mymemory import MyMemoryTranslator
from .pipeline import TranslationPipeline

__all__ = [
    "Translator",
    "RemoteTranslator",
    "TranslationResult",
    "GoogleTranslator",
    "MyMemoryTranslator",
    "LibreTranslator",
    "DictionaryTranslator",
    "TranslationPipeline",
]
