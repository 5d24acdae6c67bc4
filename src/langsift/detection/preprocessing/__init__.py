"""
LangSift Text Preprocessing Components

Available Preprocessors:
    - MarkupCleaner: Removes HTML tags and artifacts
    - AddressCleaner: Removes URLs and e-mail addresses
    - TextNormalizer: Script-aware character normalization

Available Extractors:
    - NGramExtractor: Produces the 1..3 character n-grams of normalized text
"""

from .cleaners import AddressCleaner, MarkupCleaner
from .ngrams import NGramExtractor, NGramSequence
from .normalizer import TextNormalizer

__all__ = [
    "AddressCleaner",
    "MarkupCleaner",
    "NGramExtractor",
    "NGramSequence",
    "TextNormalizer",
]
