"""
Randomized Bayesian filtering over character n-grams.

The Detector turns a sequence of n-grams into a probability vector over the
languages of a ProfileStore. It runs a fixed number of independent trials
and averages them, so the order in which evidence is drawn does not bias the
result.

Trial algorithm:
    1. Seed a private random generator from a digest of the text, the
       trial index and the detection parameters
    2. Jitter the smoothing constant: alpha' = alpha + N(0, 1) * alpha_width
    3. Start from a uniform prior over the store's languages
    4. Draw n-grams in random order; for each draw multiply every
       language's probability by the smoothed likelihood

           freq(lang, g) / total(lang, |g|) + alpha' / base_frequency

       and renormalize
    5. Stop after iteration_limit draws, or earlier when a periodic check
       finds the top probability above conv_threshold
    6. Return the final vector

The additive term bounds how far a single draw can move the vector: an
n-gram a language has never seen costs it a factor of about
base_frequency * relative frequency, not an outright zero. With many
loaded languages this keeps one unlucky draw from settling a trial, so the
convergence threshold sits close to one.

Short inputs are drawn with replacement, so a short but decisive text
still drives the filter to convergence; inputs with at least
iteration_limit n-grams are drawn without replacement.

Trials share nothing but the read-only store. They may run on a thread
pool; their vectors are always combined in trial order, so scheduling
never changes the average.

Example:
    >>> detector = Detector(store, DetectionParameters())
    >>> vector = detector.classify(["t", "th", "the"], seed_text="the")
    >>> dict(zip(store.languages, vector))
"""

import hashlib
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, List

import numpy as np

from langsift.core.config.validation import DetectionParameters
from langsift.core.exceptions.custom_exceptions import EvidenceError
from langsift.core.logging.logger import get_logger
from langsift.detection.profiles.store import ProfileStore

logger = get_logger(__name__)


def trial_seed(seed_text: str, trial_index: int, fingerprint: str) -> int:
    """
    Deterministic 64-bit seed of one trial.

    Uses BLAKE2b rather than hash(), whose value for str changes between
    interpreter processes.
    """
    digest = hashlib.blake2b(digest_size=8)
    digest.update(seed_text.encode("utf-8", "surrogatepass"))
    digest.update(b"\x00")
    digest.update(str(trial_index).encode("ascii"))
    digest.update(b"\x00")
    digest.update(fingerprint.encode("utf-8"))
    return int.from_bytes(digest.digest(), "big")


class Detector:
    """
    Classifier over a fixed ProfileStore.

    Args:
        store (ProfileStore): Profiles to classify against; never mutated
        parameters (DetectionParameters): Trial count, smoothing and
            stopping constants
    """

    def __init__(self, store: ProfileStore, parameters: DetectionParameters):
        self.store = store
        self.parameters = parameters
        self._fingerprint = parameters.fingerprint()

    def relative_frequencies(self, ngrams: List[str]) -> np.ndarray:
        """
        Share of each n-gram among same-length n-grams, per language.

        A language whose profile holds no n-grams of that length gets zero.

        Returns:
            np.ndarray: Matrix of shape (len(ngrams), len(store.languages))
        """
        matrix = np.zeros((len(ngrams), len(self.store)), dtype=np.float64)
        for row, ngram in enumerate(ngrams):
            totals = self.store.totals(len(ngram))
            np.divide(
                self.store.frequencies(ngram), totals, out=matrix[row], where=totals > 0
            )
        return matrix

    def classify(self, ngrams: Iterable[str], seed_text: str) -> np.ndarray:
        """
        Average the outcome of all trials over the given n-grams.

        N-grams that no profile in the store has seen carry no evidence
        and are discarded.

        Args:
            ngrams: N-gram tokens in text order
            seed_text: Text the trial seeds are derived from

        Returns:
            np.ndarray: Probabilities in store language order, summing to 1

        Raises:
            EvidenceError: If no usable n-gram remains
        """
        tokens = self.store.known(ngrams)
        if not tokens:
            raise EvidenceError(
                "No n-gram of the text appears in any loaded profile",
                error_code="NO_EVIDENCE",
                details={"languages": len(self.store)},
            )

        if len(self.store) == 1:
            return np.ones(1, dtype=np.float64)

        # Each distinct n-gram gets one frequency row; draws index into it
        distinct = sorted(set(tokens))
        row_of = {ngram: row for row, ngram in enumerate(distinct)}
        matrix = self.relative_frequencies(distinct)
        rows = np.array([row_of[token] for token in tokens], dtype=np.intp)

        trials = range(self.parameters.number_of_trials)
        if self.parameters.trial_workers > 1:
            with ThreadPoolExecutor(max_workers=self.parameters.trial_workers) as pool:
                vectors = list(
                    pool.map(lambda t: self._run_trial(t, matrix, rows, seed_text), trials)
                )
        else:
            vectors = [self._run_trial(t, matrix, rows, seed_text) for t in trials]

        total = np.zeros(len(self.store), dtype=np.float64)
        for vector in vectors:
            total += vector
        return total / len(vectors)

    def _draw_order(self, rng: random.Random, count: int) -> Iterator[int]:
        limit = self.parameters.iteration_limit
        if count >= limit:
            yield from rng.sample(range(count), limit)
        else:
            for _ in range(limit):
                yield rng.randrange(count)

    def _run_trial(
        self,
        trial_index: int,
        matrix: np.ndarray,
        rows: np.ndarray,
        seed_text: str,
    ) -> np.ndarray:
        rng = random.Random(trial_seed(seed_text, trial_index, self._fingerprint))
        alpha = self._trial_alpha(rng)
        weight = alpha / self.parameters.base_frequency
        prob = np.full(len(self.store), 1.0 / len(self.store), dtype=np.float64)
        interval = self.parameters.convergence_check_interval
        threshold = self.parameters.conv_threshold

        draws = 0
        converged = False
        for position in self._draw_order(rng, len(rows)):
            prob *= matrix[rows[position]] + weight
            prob /= prob.sum()
            draws += 1
            if draws % interval == 0 and prob.max() > threshold:
                converged = True
                break

        logger.debug(
            "Trial finished",
            trial=trial_index,
            alpha=alpha,
            draws=draws,
            converged=converged,
            top=self.store.languages[int(prob.argmax())],
            max_probability=float(prob.max()),
        )
        return prob

    def _trial_alpha(self, rng: random.Random) -> float:
        alpha = self.parameters.alpha + rng.gauss(0.0, 1.0) * self.parameters.alpha_width
        # A non-positive draw would let an unseen n-gram zero out a language
        return alpha if alpha > 0 else self.parameters.alpha
