"""
Immutable per-language n-gram frequency tables.

Profiles use the langdetect JSON layout::

    {"name": "en", "freq": {"e": 2187, "th": 401, "the": 180, ...},
     "n_words": [38470, 35224, 30221]}

``freq`` mixes n-grams of all lengths; ``n_words`` holds the total
frequency mass of 1-, 2- and 3-grams.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, KeysView, Mapping, Optional, Tuple

from langsift.core.exceptions.custom_exceptions import ProfileDataError
from langsift.detection.preprocessing.ngrams import MAX_NGRAM_LENGTH


@dataclass(frozen=True)
class LanguageProfile:
    """
    N-gram frequency table for one language.

    Attributes:
        code (str): Language code, e.g. "en" or "zh-cn"
        frequencies (Tuple[Mapping[str, int], ...]): Read-only n-gram counts,
            indexed by n-gram length minus one
        totals (Tuple[int, ...]): Total frequency mass per n-gram length
    """

    code: str
    frequencies: Tuple[Mapping[str, int], ...]
    totals: Tuple[int, ...]

    @classmethod
    def from_dict(cls, data: Any, code: Optional[str] = None) -> "LanguageProfile":
        """
        Build a profile from its langdetect JSON representation.

        Args:
            data: Parsed JSON document
            code: Expected language code (usually the profile file name)

        Raises:
            ProfileDataError: If the document is not a valid profile
        """
        if not isinstance(data, dict):
            raise ProfileDataError(
                "Profile must be a JSON object", details={"code": code}
            )

        name = data.get("name") or code
        if not name:
            raise ProfileDataError("Profile has no language name")
        if code is not None and name != code:
            raise ProfileDataError(
                f"Profile name {name!r} does not match its code {code!r}",
                details={"code": code, "name": name},
            )

        freq = data.get("freq")
        n_words = data.get("n_words")
        if not isinstance(freq, dict):
            raise ProfileDataError(
                "Profile is missing the 'freq' table", details={"code": name}
            )
        if not isinstance(n_words, list) or len(n_words) < MAX_NGRAM_LENGTH:
            raise ProfileDataError(
                f"Profile 'n_words' must list {MAX_NGRAM_LENGTH} totals",
                details={"code": name, "n_words": n_words},
            )

        tables = [{} for _ in range(MAX_NGRAM_LENGTH)]
        for ngram, count in freq.items():
            if not 1 <= len(ngram) <= MAX_NGRAM_LENGTH:
                continue
            if not isinstance(count, int) or count < 0:
                raise ProfileDataError(
                    f"Invalid count for n-gram {ngram!r}",
                    details={"code": name, "count": count},
                )
            tables[len(ngram) - 1][ngram] = count

        totals = []
        for total in n_words[:MAX_NGRAM_LENGTH]:
            if not isinstance(total, int) or total < 0:
                raise ProfileDataError(
                    "Invalid n-gram total", details={"code": name, "total": total}
                )
            totals.append(total)

        return cls(
            code=name,
            frequencies=tuple(MappingProxyType(table) for table in tables),
            totals=tuple(totals),
        )

    def frequency(self, ngram: str) -> int:
        """Occurrence count of the n-gram, zero when unseen"""
        if not 1 <= len(ngram) <= len(self.frequencies):
            return 0
        return self.frequencies[len(ngram) - 1].get(ngram, 0)

    def total(self, n: int) -> int:
        return self.totals[n - 1]

    def vocabulary(self, n: int) -> KeysView:
        return self.frequencies[n - 1].keys()

    def __len__(self) -> int:
        return sum(len(table) for table in self.frequencies)
