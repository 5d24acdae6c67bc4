"""
The active, read-only set of language profiles.

A ProfileStore is built once, when a detector is constructed, and never
mutated afterwards. Every lookup is a pure read, so one store can be shared
by any number of concurrent detections without locking. Languages are kept
in code order and every per-language vector the store returns follows that
order.

Example:
    >>> store = ProfileStore.load({"en", "de"}, ProfileVariant.DEFAULT)
    >>> store.languages
    ('de', 'en')
    >>> store.frequency("en", "th") > store.frequency("de", "th")
    True
    >>> store.frequency("en", "qqq")
    0
"""

from types import MappingProxyType
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from langsift.core.config.validation import ProfileVariant
from langsift.core.exceptions.custom_exceptions import ConfigurationError
from langsift.core.logging.logger import get_logger
from langsift.detection.preprocessing.ngrams import MAX_NGRAM_LENGTH
from langsift.detection.profiles.profile import LanguageProfile
from langsift.detection.profiles.sources import ProfileSource, profile_source_for

logger = get_logger(__name__)


class ProfileStore:
    """
    Immutable collection of profiles drawn from one variant.

    Args:
        profiles: Profiles to hold, one per language code
        variant: Variant the profiles were drawn from

    Raises:
        ConfigurationError: If no profile is given or a code repeats
    """

    def __init__(
        self,
        profiles: Sequence[LanguageProfile],
        variant: ProfileVariant = ProfileVariant.DEFAULT,
    ):
        if not profiles:
            raise ConfigurationError(
                "A profile store needs at least one language",
                error_code="EMPTY_PROFILE_STORE",
            )
        ordered = sorted(profiles, key=lambda profile: profile.code)
        codes = tuple(profile.code for profile in ordered)
        if len(set(codes)) != len(codes):
            raise ConfigurationError(
                "Duplicate language profiles",
                error_code="DUPLICATE_PROFILE",
                details={"languages": list(codes)},
            )

        self._variant = ProfileVariant(variant)
        self._languages = codes
        self._profiles = MappingProxyType(
            {profile.code: profile for profile in ordered}
        )

        totals = np.array(
            [
                [profile.total(n) for n in range(1, MAX_NGRAM_LENGTH + 1)]
                for profile in ordered
            ],
            dtype=np.float64,
        )
        totals.setflags(write=False)
        self._totals = totals

        self._vocabulary = tuple(
            frozenset().union(*(profile.vocabulary(n) for profile in ordered))
            for n in range(1, MAX_NGRAM_LENGTH + 1)
        )

    @classmethod
    def load(
        cls,
        language_codes: Optional[Iterable[str]] = None,
        variant: ProfileVariant = ProfileVariant.DEFAULT,
        source: Optional[ProfileSource] = None,
    ) -> "ProfileStore":
        """
        Build a store for a language subset of one profile variant.

        Args:
            language_codes: Codes to load; empty or None loads every
                language the source supplies
            variant: Profile variant to draw from
            source: Profile supplier; defaults to the variant's configured
                source

        Returns:
            ProfileStore: The read-only store

        Raises:
            ConfigurationError: For an unknown variant, a variant without
                profile data, or codes with no stored profile
        """
        try:
            variant = ProfileVariant(variant)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown profile variant: {variant!r}",
                error_code="UNKNOWN_PROFILE_VARIANT",
                details={"known": [v.value for v in ProfileVariant]},
            ) from e

        if source is None:
            source = profile_source_for(variant)

        available = source.available_languages()
        requested = sorted(set(language_codes or ())) or available
        unknown = sorted(set(requested) - set(available))
        if unknown:
            raise ConfigurationError(
                f"No {variant.value} profile for language codes: {', '.join(unknown)}",
                error_code="UNKNOWN_LANGUAGE",
                details={"unknown": unknown, "variant": variant.value},
            )

        profiles = [source.load(code) for code in requested]
        store = cls(profiles, variant)
        logger.info(
            "Loaded language profiles",
            variant=variant.value,
            languages=len(store),
            source=source.description,
        )
        return store

    @property
    def languages(self) -> Tuple[str, ...]:
        return self._languages

    @property
    def variant(self) -> ProfileVariant:
        return self._variant

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, code: object) -> bool:
        return code in self._profiles

    def __repr__(self) -> str:
        return (
            f"ProfileStore(variant={self._variant.value!r}, "
            f"languages={list(self._languages)!r})"
        )

    def profile(self, code: str) -> LanguageProfile:
        return self._profiles[code]

    def frequency(self, code: str, ngram: str) -> int:
        """
        Occurrence count of an n-gram in one language's profile.

        Returns zero for unseen n-grams; raises KeyError for a language
        that is not in the store.
        """
        return self._profiles[code].frequency(ngram)

    def frequencies(self, ngram: str) -> np.ndarray:
        """Counts of the n-gram in every profile, in store order"""
        return np.array(
            [self._profiles[code].frequency(ngram) for code in self._languages],
            dtype=np.float64,
        )

    def totals(self, n: int) -> np.ndarray:
        """Total frequency mass of n-grams of length n, in store order"""
        return self._totals[:, n - 1]

    def vocabulary_size(self, n: int) -> int:
        """Distinct n-grams of length n across every profile in the store"""
        return len(self._vocabulary[n - 1])

    def is_known(self, ngram: str) -> bool:
        """Whether any profile in the store has seen the n-gram"""
        if not 1 <= len(ngram) <= MAX_NGRAM_LENGTH:
            return False
        return ngram in self._vocabulary[len(ngram) - 1]

    def known(self, ngrams: Iterable[str]) -> List[str]:
        """N-grams that some profile in the store has seen, in input order"""
        return [ngram for ngram in ngrams if self.is_known(ngram)]
