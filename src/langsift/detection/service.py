"""
Public detection API.

LanguageDetectionService wires the pipeline together:

    text -> TextNormalizer -> NGramExtractor -> Detector (ProfileStore)
         -> ResultRanker -> [Language(code, probability), ...]

The service is built once per configuration. Its profile store is read-only
and every call keeps its working state private, so one service can serve
concurrent callers and an abandoned call leaves nothing behind.

Operations:
    detect_all(text): Ranked languages, possibly empty
    detect(text): Best language code
    classify(text): DetectionOutcome variant instead of exceptions

Example:
    >>> service = new_detector(languages=["en", "fr", "de"])
    >>> service.detect("The quick brown fox jumps over the lazy dog")
    'en'
    >>> service.detect_all("Bonjour tout le monde, comment allez-vous")[0].code
    'fr'
    >>> service.classify("   ").status
    <DetectionStatus.NO_EVIDENCE: 'no_evidence'>
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np

from langsift.core.config.validation import (
    ConfigValidator,
    DetectionParameters,
    DetectorConfig,
)
from langsift.core.exceptions.custom_exceptions import EvidenceError
from langsift.core.logging.logger import get_logger
from langsift.detection.base import DetectionOutcome, Language
from langsift.detection.detector import Detector
from langsift.detection.preprocessing.ngrams import NGramExtractor
from langsift.detection.preprocessing.normalizer import TextNormalizer
from langsift.detection.profiles.sources import ProfileSource
from langsift.detection.profiles.store import ProfileStore
from langsift.detection.ranker import ResultRanker

logger = get_logger(__name__)

ConfigLike = Union[DetectorConfig, Mapping[str, Any], None]
ParametersLike = Union[DetectionParameters, Mapping[str, Any], None]


class LanguageDetectionService:
    """
    Language detector for one language subset and profile variant.

    Args:
        config: DetectorConfig or mapping with ``languages`` and
            ``profile_variant``; defaults to the application settings
        parameters: DetectionParameters or mapping; defaults to the
            application settings
        source: Profile supplier overriding the variant's configured one

    Raises:
        ConfigurationError: For unknown language codes or profile variants
    """

    def __init__(
        self,
        config: ConfigLike = None,
        parameters: ParametersLike = None,
        source: Optional[ProfileSource] = None,
    ):
        self.config = _coerce_config(config)
        self.parameters = _coerce_parameters(parameters)

        self.store = ProfileStore.load(
            self.config.languages, self.config.profile_variant, source
        )
        self.normalizer = TextNormalizer()
        self.extractor = NGramExtractor()
        self.detector = Detector(self.store, self.parameters)
        self.ranker = ResultRanker(self.parameters.prob_threshold)

    @property
    def languages(self) -> Tuple[str, ...]:
        """Language codes this service can report"""
        return self.store.languages

    def probabilities(self, text: str) -> np.ndarray:
        """
        Averaged probability vector in ``languages`` order.

        Raises:
            EvidenceError: If the text yields no usable n-grams
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        text = text[: self.parameters.max_text_length]
        ngrams = self.extractor.extract(self.normalizer(text))
        return self.detector.classify(ngrams, seed_text=text)

    def detect_all(self, text: str) -> List[Language]:
        """
        Rank every configured language by probability.

        Returns:
            List[Language]: Languages above the report threshold, most
            probable first; empty when none clears the threshold

        Raises:
            EvidenceError: For empty, whitespace-only or symbol-only text
        """
        ranked = self.ranker.rank(self.languages, self.probabilities(text))
        logger.debug(
            "Detected languages",
            text_length=len(text),
            top=ranked[0].code if ranked else None,
            candidates=len(ranked),
        )
        return ranked

    def detect(self, text: str) -> str:
        """
        Code of the most probable language.

        Raises:
            EvidenceError: If the text yields no usable n-grams
            NoConfidentResultError: If no language clears the threshold
        """
        return self.ranker.best(self.detect_all(text)).code

    def classify(self, text: str) -> DetectionOutcome:
        """
        Detect without raising for call-time conditions.

        Returns:
            DetectionOutcome: DETECTED with the ranked languages,
            NO_EVIDENCE when the text has no usable n-grams, or
            NO_CONFIDENT_RESULT when nothing clears the threshold
        """
        try:
            ranked = self.detect_all(text)
        except EvidenceError as e:
            return DetectionOutcome.no_evidence(e.message)
        if not ranked:
            return DetectionOutcome.no_confident_result(
                "No language cleared the probability threshold"
            )
        return DetectionOutcome.detected(ranked)

    def describe(self) -> Dict[str, Any]:
        return {
            "languages": list(self.languages),
            "profile_variant": self.store.variant.value,
            "parameters": self.parameters.model_dump(),
        }


def _coerce_config(config: ConfigLike) -> DetectorConfig:
    if config is None:
        return DetectorConfig.from_settings()
    if isinstance(config, DetectorConfig):
        return config
    return ConfigValidator.validate_config(dict(config))


def _coerce_parameters(parameters: ParametersLike) -> DetectionParameters:
    if isinstance(parameters, DetectionParameters):
        return parameters
    merged = DetectionParameters.from_settings().model_dump()
    merged.update(parameters or {})
    return ConfigValidator.validate_parameters(merged)


def new_detector(
    config: ConfigLike = None,
    parameters: ParametersLike = None,
    source: Optional[ProfileSource] = None,
    **overrides: Any,
) -> LanguageDetectionService:
    """
    Build a detection service.

    Keyword overrides (``languages``, ``profile_variant``) replace the
    matching fields of ``config``.

    Example:
        >>> service = new_detector(languages="en,de", profile_variant="default")
    """
    if overrides:
        base = _coerce_config(config).model_dump()
        base.update(overrides)
        config = ConfigValidator.validate_config(base)
    return LanguageDetectionService(config, parameters, source)
