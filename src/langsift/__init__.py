"""
LangSift - Character N-gram Language Identification

LangSift identifies the natural language of arbitrary text by comparing its
character n-gram statistics against trained per-language frequency profiles,
returning a ranked probability distribution over language codes.

Key Features:
    - Script-aware text normalization (kana, hangul, kanji clusters, ...)
    - Randomized Bayesian filtering with reproducible per-trial seeds
    - Default and short-text profile variants
    - Read-only profile store shared safely across threads
    - Explicit error taxonomy and exception-free classify() variant
    - Substring accuracy evaluation and a command line interface

Modules:
    core: Configuration, logging and exceptions
    detection: Normalization, n-grams, profiles, detector and ranking
    cli: Command-line interface tools

Example:
    >>> from langsift import new_detector
    >>> service = new_detector()
    >>> service.detect("The quick brown fox jumps over the lazy dog")
    'en'
"""

__version__ = "0.1.0"
__author__ = "LangSift"
__description__ = (
    "Language identification from character n-gram profiles using "
    "randomized Bayesian filtering."
)

from langsift.core.config.settings import Settings
from langsift.core.logging.logger import get_logger
from langsift.detection import Language, LanguageDetectionService, new_detector

__all__ = [
    "Language",
    "LanguageDetectionService",
    "Settings",
    "get_logger",
    "new_detector",
]
