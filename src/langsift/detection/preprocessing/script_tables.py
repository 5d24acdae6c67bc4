"""
Per-script character normalization tables.

The trained profiles were built from text normalized with these rules, so
the detector has to apply exactly the same mapping before extracting
n-grams. Characters that only differ by script-internal variation (kana,
hangul syllables, kanji of the same frequency cluster, Romanian comma and
cedilla forms) collapse to one representative so they do not split the
n-gram statistics.

The kanji cluster table is data supplied alongside the langdetect profiles
(``langdetect/utils/messages.properties``).
"""

import unicodedata
from functools import lru_cache
from importlib import resources
from typing import Dict

from langsift.core.exceptions.custom_exceptions import ProfileDataError
from langsift.core.logging.logger import get_logger

logger = get_logger(__name__)

SEPARATOR = " "

BASIC_LATIN = (0x0000, 0x007F)
LATIN_1_SUPPLEMENT = (0x0080, 0x00FF)
LATIN_EXTENDED_B = (0x0180, 0x024F)
ARABIC = (0x0600, 0x06FF)
LATIN_EXTENDED_ADDITIONAL = (0x1E00, 0x1EFF)
GENERAL_PUNCTUATION = (0x2000, 0x206F)
HIRAGANA = (0x3040, 0x309F)
KATAKANA = (0x30A0, 0x30FF)
BOPOMOFO = (0x3100, 0x312F)
BOPOMOFO_EXTENDED = (0x31A0, 0x31BF)
CJK_UNIFIED_IDEOGRAPHS = (0x4E00, 0x9FFF)
HANGUL_SYLLABLES = (0xAC00, 0xD7AF)

# Letters outside Basic Latin that still count as Latin script
LATIN_SCRIPT_BLOCKS = (LATIN_1_SUPPLEMENT, LATIN_EXTENDED_ADDITIONAL)

ROMANIAN_COMMA_BELOW = {
    "ș": "ş",  # s with comma below -> s with cedilla
    "ț": "ţ",  # t with comma below -> t with cedilla
}
FARSI_YEH = "ی"
ARABIC_YEH = "ي"
VIETNAMESE_REPRESENTATIVE = "ể"
HIRAGANA_REPRESENTATIVE = "あ"
KATAKANA_REPRESENTATIVE = "ア"
BOPOMOFO_REPRESENTATIVE = "ㄅ"
HANGUL_REPRESENTATIVE = "가"

KANJI_CLUSTER_PREFIX = "NGram.KANJI_"

# Unicode general categories that never carry language signal
_NOISE_CATEGORIES = ("N", "P", "S", "Z", "C")


def in_block(code_point: int, block) -> bool:
    return block[0] <= code_point <= block[1]


def is_ascii_letter(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def is_noise(ch: str) -> bool:
    """Digits, punctuation, symbols, separators and control characters"""
    return unicodedata.category(ch)[0] in _NOISE_CATEGORIES


@lru_cache(maxsize=1)
def load_kanji_clusters() -> Dict[str, str]:
    """
    Map every clustered kanji to the first character of its cluster.

    Raises:
        ProfileDataError: If the cluster table cannot be read
    """
    try:
        table = resources.files("langdetect.utils").joinpath("messages.properties")
        content = table.read_text(encoding="utf-8")
    except (ModuleNotFoundError, OSError) as e:
        raise ProfileDataError(
            f"Kanji cluster table is unavailable: {e}",
            error_code="KANJI_TABLE_MISSING",
        ) from e

    clusters: Dict[str, str] = {}
    for line in content.splitlines():
        key, _, value = line.strip().partition("=")
        if not key.startswith(KANJI_CLUSTER_PREFIX) or not value:
            continue
        members = value.encode("ascii", "backslashreplace").decode("unicode_escape")
        representative = members[0]
        for ch in members:
            clusters[ch] = representative

    logger.debug("Loaded kanji clusters", characters=len(clusters))
    return clusters


def normalize_char(ch: str, kanji_clusters: Dict[str, str]) -> str:
    """
    Normalize a single character.

    Returns the representative character, or SEPARATOR for characters
    that carry no language signal.
    """
    cp = ord(ch)

    if in_block(cp, BASIC_LATIN):
        return ch if is_ascii_letter(ch) else SEPARATOR
    if in_block(cp, LATIN_1_SUPPLEMENT):
        return ch if unicodedata.category(ch).startswith("L") else SEPARATOR
    if in_block(cp, LATIN_EXTENDED_B):
        return ROMANIAN_COMMA_BELOW.get(ch, ch)
    if in_block(cp, GENERAL_PUNCTUATION):
        return SEPARATOR
    if in_block(cp, ARABIC):
        if ch == FARSI_YEH:
            return ARABIC_YEH
    elif in_block(cp, LATIN_EXTENDED_ADDITIONAL):
        if cp >= 0x1EA0:
            return VIETNAMESE_REPRESENTATIVE
    elif in_block(cp, HIRAGANA):
        return HIRAGANA_REPRESENTATIVE
    elif in_block(cp, KATAKANA):
        return KATAKANA_REPRESENTATIVE
    elif in_block(cp, BOPOMOFO) or in_block(cp, BOPOMOFO_EXTENDED):
        return BOPOMOFO_REPRESENTATIVE
    elif in_block(cp, CJK_UNIFIED_IDEOGRAPHS):
        return kanji_clusters.get(ch, ch)
    elif in_block(cp, HANGUL_SYLLABLES):
        return HANGUL_REPRESENTATIVE

    return SEPARATOR if is_noise(ch) else ch
