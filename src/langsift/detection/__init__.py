"""
LangSift Detection Module - N-gram Language Identification.

This module identifies the natural language of a text by comparing its
character n-gram statistics with trained per-language frequency profiles.

Core Components:
    - TextNormalizer: Script-aware character normalization
    - NGramExtractor: 1..3 character n-grams of normalized text
    - ProfileStore: Read-only set of language profiles
    - Detector: Randomized Bayesian filtering over the n-grams
    - ResultRanker: Thresholding and ordering of the probabilities
    - LanguageDetectionService: The public detect / detect_all API

Example:
    >>> from langsift.detection import new_detector
    >>>
    >>> service = new_detector(languages=["en", "de", "nl"])
    >>> service.detect("Dit is een Nederlandse zin")
    'nl'
"""

from .base import DetectionOutcome, DetectionStatus, Language
from .service import LanguageDetectionService, new_detector

__all__ = [
    "DetectionOutcome",
    "DetectionStatus",
    "Language",
    "LanguageDetectionService",
    "new_detector",
]
