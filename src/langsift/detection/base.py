"""
Base classes and data structures for the detection engine.

This module defines the result types returned to callers and the abstract
preprocessor interface the normalization stages implement.

Classes:
    Language: One ranked (language code, probability) entry
    DetectionStatus: Tag of a DetectionOutcome
    DetectionOutcome: Explicit result/error variant returned by classify()
    BasePreprocessor: Abstract base class for text preprocessing operations

Example:
    >>> outcome = service.classify("Der schnelle braune Fuchs")
    >>> if outcome.status is DetectionStatus.DETECTED:
    ...     print(outcome.best.code)
    >>> languages = outcome.unwrap()  # raises on the error variants
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from langsift.core.exceptions.custom_exceptions import (
    EvidenceError,
    NoConfidentResultError,
)


@dataclass(frozen=True)
class Language:
    """
    A detected language and its probability.

    Attributes:
        code (str): Language code of the profile, e.g. "en" or "zh-cn"
        probability (float): Averaged posterior probability in [0, 1]
    """

    code: str
    probability: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry to a JSON-serializable dictionary."""
        return {"language": self.code, "probability": self.probability}

    def __str__(self) -> str:
        return f"{self.code}:{self.probability:.6f}"


class DetectionStatus(str, Enum):
    DETECTED = "detected"
    NO_EVIDENCE = "no_evidence"
    NO_CONFIDENT_RESULT = "no_confident_result"


@dataclass(frozen=True)
class DetectionOutcome:
    """
    Result of a single detection call, expressed without exceptions.

    The three variants let callers tell "the text had no usable n-grams"
    apart from "no profile matched convincingly" and from a successful
    detection.

    Attributes:
        status (DetectionStatus): Which variant this outcome is
        languages (Tuple[Language, ...]): Ranked languages, only when detected
        reason (Optional[str]): Human-readable explanation for error variants
    """

    status: DetectionStatus
    languages: Tuple[Language, ...] = ()
    reason: Optional[str] = None

    @classmethod
    def detected(cls, languages) -> "DetectionOutcome":
        return cls(DetectionStatus.DETECTED, tuple(languages))

    @classmethod
    def no_evidence(cls, reason: str) -> "DetectionOutcome":
        return cls(DetectionStatus.NO_EVIDENCE, reason=reason)

    @classmethod
    def no_confident_result(cls, reason: str) -> "DetectionOutcome":
        return cls(DetectionStatus.NO_CONFIDENT_RESULT, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is DetectionStatus.DETECTED

    @property
    def best(self) -> Optional[Language]:
        """Highest ranked language, or None for the error variants"""
        return self.languages[0] if self.languages else None

    def unwrap(self) -> Tuple[Language, ...]:
        """
        Return the ranked languages or raise the matching exception.

        Raises:
            EvidenceError: For the NO_EVIDENCE variant
            NoConfidentResultError: For the NO_CONFIDENT_RESULT variant
        """
        if self.status is DetectionStatus.NO_EVIDENCE:
            raise EvidenceError(self.reason or "no usable n-grams")
        if self.status is DetectionStatus.NO_CONFIDENT_RESULT:
            raise NoConfidentResultError(self.reason or "no confident detection")
        return self.languages

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "languages": [language.to_dict() for language in self.languages],
            "reason": self.reason,
        }


class BasePreprocessor(ABC):
    """
    Abstract base class for all text preprocessors.

    Preprocessors clean and normalize raw text before n-gram extraction.
    They must be total, deterministic and free of side effects. The
    __call__ method lets a preprocessor be used as a plain function.

    Example:
        >>> normalizer = TextNormalizer()
        >>> normalizer("Hello,   World!")
        'Hello World'
    """

    @abstractmethod
    def process(self, content: str) -> str:
        """
        Process raw content and return the cleaned version.

        Args:
            content (str): Raw text content to be processed

        Returns:
            str: Cleaned and normalized text content
        """
        pass

    def __call__(self, content: str) -> str:
        return self.process(content)
