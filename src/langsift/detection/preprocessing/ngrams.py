"""
Character n-gram extraction.

The extractor slides 1-, 2- and 3-character windows over normalized text.
Windows never cross a separator, so every n-gram lies within one token.
N-grams are produced in left-to-right order of their last character,
shortest first, which is the order a reader encounters them.

Example:
    >>> sequence = NGramExtractor().extract("the cat")
    >>> list(sequence)
    ['t', 'h', 'th', 'e', 'he', 'the', 'c', 'a', 'ca', 't', 'at', 'cat']
"""

from typing import Iterator, List

from langsift.core.exceptions.custom_exceptions import EvidenceError
from langsift.detection.preprocessing.script_tables import SEPARATOR

MAX_NGRAM_LENGTH = 3


class NGramSequence:
    """
    Lazy, finite and restartable sequence of n-gram tokens.

    Iterating the sequence regenerates the n-grams from the underlying
    text, so it may be iterated any number of times.
    """

    def __init__(self, text: str, max_length: int = MAX_NGRAM_LENGTH):
        self.text = text
        self.max_length = max_length

    def __iter__(self) -> Iterator[str]:
        for token in self.text.split(SEPARATOR):
            for end in range(1, len(token) + 1):
                if _inside_upper_run(token, end - 1):
                    continue
                for n in range(1, self.max_length + 1):
                    if n > end:
                        break
                    yield token[end - n : end]

    def __repr__(self) -> str:
        return f"NGramSequence(text={self.text!r}, max_length={self.max_length})"

    def is_empty(self) -> bool:
        return next(iter(self), None) is None

    def to_list(self) -> List[str]:
        return list(self)


def _inside_upper_run(token: str, index: int) -> bool:
    # Acronyms and all-caps words do not follow the language's spelling
    return index > 0 and token[index].isupper() and token[index - 1].isupper()


class NGramExtractor:
    """
    Builds n-gram sequences from normalized text.

    Args:
        max_length (int): Longest n-gram produced (profiles hold 1..3)
    """

    def __init__(self, max_length: int = MAX_NGRAM_LENGTH):
        if max_length < 1:
            raise ValueError("max_length must be at least 1")
        self.max_length = max_length

    def extract(self, normalized_text: str) -> NGramSequence:
        """
        Extract the n-grams of already normalized text.

        Args:
            normalized_text (str): Output of TextNormalizer

        Returns:
            NGramSequence: Lazy sequence of the text's n-grams

        Raises:
            EvidenceError: If the text yields no n-gram of any length
        """
        sequence = NGramSequence(normalized_text, self.max_length)
        if sequence.is_empty():
            raise EvidenceError(
                "Text yields no n-grams",
                error_code="INSUFFICIENT_EVIDENCE",
                details={"normalized_length": len(normalized_text)},
            )
        return sequence
