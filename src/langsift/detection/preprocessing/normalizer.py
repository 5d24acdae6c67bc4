"""
Text normalization ahead of n-gram extraction.

TextNormalizer is a total, deterministic function over any string: it never
fails, it only reduces the input to the characters that carry language
signal, separated by single spaces. Separators are n-gram boundaries.

Normalization steps:
    1. Remove URLs and e-mail addresses
    2. Compose combining marks (NFC)
    3. Drop ASCII letters when non-Latin letters dominate the text
    4. Map every character through the per-script tables
    5. Collapse separator runs to one space and trim

Example:
    >>> normalizer = TextNormalizer()
    >>> normalizer("Ce n'est pas   42 ! Mais ça, oui.")
    'Ce n est pas Mais ça oui'
    >>> normalizer("こんにちは、カタカナ")  # kana collapse, CJK punctuation drops
    'あああああ アアアア'
"""

import unicodedata
from typing import Dict, Optional

from langsift.detection.base import BasePreprocessor
from langsift.detection.preprocessing.cleaners import AddressCleaner
from langsift.detection.preprocessing.script_tables import (
    LATIN_EXTENDED_ADDITIONAL,
    SEPARATOR,
    in_block,
    is_ascii_letter,
    load_kanji_clusters,
    normalize_char,
)


class TextNormalizer(BasePreprocessor):
    """
    Script-aware character normalizer.

    Args:
        kanji_clusters: Optional kanji-to-representative mapping. Defaults
            to the cluster table shipped with the profile data.
    """

    def __init__(self, kanji_clusters: Optional[Dict[str, str]] = None):
        self.kanji_clusters = (
            kanji_clusters if kanji_clusters is not None else load_kanji_clusters()
        )
        self.address_cleaner = AddressCleaner()

    def process(self, content: str) -> str:
        text = self.address_cleaner(content)
        text = unicodedata.normalize("NFC", text)
        text = self.drop_minority_latin(text)
        mapped = "".join(normalize_char(ch, self.kanji_clusters) for ch in text)
        return SEPARATOR.join(mapped.split())

    @staticmethod
    def drop_minority_latin(text: str) -> str:
        """
        Remove ASCII letters from text written mostly in a non-Latin script.

        Embedded Latin words (brand names, code, transliterations) would
        otherwise pull short non-Latin texts towards Latin-script languages.
        """
        latin_count = 0
        non_latin_count = 0
        for ch in text:
            if is_ascii_letter(ch):
                latin_count += 1
            elif (
                ord(ch) >= 0x0300
                and unicodedata.category(ch)[0] in ("L", "M")
                and not in_block(ord(ch), LATIN_EXTENDED_ADDITIONAL)
            ):
                non_latin_count += 1

        if latin_count * 2 >= non_latin_count:
            return text
        return "".join(SEPARATOR if is_ascii_letter(ch) else ch for ch in text)
