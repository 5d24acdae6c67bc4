"""
Turns the detector's probability vector into the ranked result.
"""

from typing import List, Sequence

from langsift.core.exceptions.custom_exceptions import NoConfidentResultError
from langsift.detection.base import Language


class ResultRanker:
    """
    Filters and orders detection probabilities.

    Entries below ``prob_threshold`` are dropped; the rest are sorted by
    probability, highest first, with ties broken by language code.

    Args:
        prob_threshold (float): Minimum probability worth reporting
    """

    def __init__(self, prob_threshold: float = 0.001):
        self.prob_threshold = prob_threshold

    def rank(self, languages: Sequence[str], probabilities: Sequence[float]) -> List[Language]:
        if len(languages) != len(probabilities):
            raise ValueError("languages and probabilities differ in length")

        ranked = [
            Language(code, min(max(float(p), 0.0), 1.0))
            for code, p in zip(languages, probabilities)
            if p >= self.prob_threshold
        ]
        ranked.sort(key=lambda language: (-language.probability, language.code))
        return ranked

    @staticmethod
    def best(ranked: Sequence[Language]) -> Language:
        """
        Head of a ranked result.

        Raises:
            NoConfidentResultError: If the ranked result is empty
        """
        if not ranked:
            raise NoConfidentResultError(
                "No language cleared the probability threshold",
                error_code="NO_CONFIDENT_DETECTION",
            )
        return ranked[0]
