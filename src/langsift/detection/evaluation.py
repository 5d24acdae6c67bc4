"""
Substring accuracy evaluation.

Measures how accuracy depends on input length: for each text of a
multi-language dataset and each substring length, a reproducible sample of
substrings is classified and the share classified correctly is computed per
language. A trial passes when both the minimum and the mean per-language
accuracy reach their thresholds.

Datasets are tab-separated files with two columns, language code and text.

Example:
    >>> service = new_detector()
    >>> dataset = read_dataset("udhr.tsv", service.languages)
    >>> for report in evaluate_accuracies(service, dataset, UDHR_TRIALS):
    ...     print(report.substring_length, report.min_accuracy, report.passed)
"""

import csv
import hashlib
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from langsift.core.exceptions.custom_exceptions import ConfigurationError, DetectionError
from langsift.core.logging.logger import get_logger
from langsift.detection.service import LanguageDetectionService

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccuracyTrial:
    """
    Parameters of one evaluation row.

    A substring_length of zero with a sample_size of one classifies each
    full text once.
    """

    substring_length: int
    sample_size: int
    min_threshold: float
    mean_threshold: float


@dataclass
class AccuracyReport:
    """Outcome of one AccuracyTrial"""

    trial: AccuracyTrial
    per_language: Dict[str, float] = field(default_factory=dict)

    @property
    def substring_length(self) -> int:
        return self.trial.substring_length

    @property
    def min_accuracy(self) -> float:
        return min(self.per_language.values()) if self.per_language else 0.0

    @property
    def mean_accuracy(self) -> float:
        if not self.per_language:
            return 0.0
        return sum(self.per_language.values()) / len(self.per_language)

    @property
    def passed(self) -> bool:
        return (
            self.min_accuracy >= self.trial.min_threshold
            and self.mean_accuracy >= self.trial.mean_threshold
        )


# Calibration tables on the Universal Declaration of Human Rights corpus
UDHR_TRIALS = (
    AccuracyTrial(5, 100, 0.26, 0.65),
    AccuracyTrial(10, 100, 0.46, 0.82),
    AccuracyTrial(20, 100, 0.73, 0.94),
    AccuracyTrial(50, 100, 0.85, 0.98),
    AccuracyTrial(100, 100, 0.94, 0.99),
    AccuracyTrial(300, 100, 1.00, 1.00),
    AccuracyTrial(0, 1, 1.00, 1.00),
)

UDHR_SHORT_TEXT_TRIALS = (
    AccuracyTrial(5, 100, 0.16, 0.64),
    AccuracyTrial(10, 100, 0.50, 0.82),
    AccuracyTrial(20, 100, 0.68, 0.93),
    AccuracyTrial(50, 100, 0.86, 0.98),
    AccuracyTrial(100, 100, 0.94, 0.99),
    AccuracyTrial(300, 100, 0.99, 0.99),
    AccuracyTrial(0, 1, 1.00, 1.00),
)


def _sample_seed(text: str, substring_length: int, sample_size: int) -> int:
    digest = hashlib.blake2b(digest_size=8)
    digest.update(f"{substring_length}\x00{sample_size}\x00".encode("ascii"))
    digest.update(text.encode("utf-8", "surrogatepass"))
    return int.from_bytes(digest.digest(), "big")


def substring_sample(text: str, substring_length: int, sample_size: int) -> List[str]:
    """
    Draw a reproducible sample of substrings from a text.

    Substrings are drawn uniformly with replacement from all substrings of
    the given length, skipping whitespace-only ones. The generator is seeded
    from the arguments, so repeated calls return the same sample.

    Args:
        text: Text to sample from
        substring_length: Length of each substring; zero together with a
            sample_size of one returns the text itself
        sample_size: Number of substrings to draw

    Raises:
        ValueError: If the substring length exceeds the trimmed text length
    """
    if substring_length == 0 and sample_size == 1:
        return [text]
    if substring_length < 1 or sample_size < 1:
        raise ValueError("substring_length and sample_size must be positive")
    if substring_length > len(text.strip()):
        raise ValueError("Provided text is too short.")

    rng = random.Random(_sample_seed(text, substring_length, sample_size))
    sample: List[str] = []
    while len(sample) < sample_size:
        start = rng.randrange(len(text) - substring_length + 1)
        substring = text[start : start + substring_length]
        if substring.strip():
            sample.append(substring)
    return sample


def read_dataset(
    path: Union[str, Path], supported: Optional[Iterable[str]] = None
) -> Dict[str, List[str]]:
    """
    Read a multi-language dataset.

    Args:
        path: Tab-separated file, one ``code<TAB>text`` row per text
        supported: Codes to keep; None keeps every language

    Returns:
        Dict[str, List[str]]: Texts grouped by language code

    Raises:
        ConfigurationError: If the file cannot be read
    """
    keep = set(supported) if supported is not None else None
    dataset: Dict[str, List[str]] = {}
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for row in csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE):
                if len(row) < 2:
                    continue
                code, text = row[0], row[1]
                if keep is not None and code not in keep:
                    continue
                dataset.setdefault(code, []).append(text)
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read dataset: {e}", details={"path": str(path)}
        ) from e
    return dataset


def top_language(service: LanguageDetectionService, text: str) -> Optional[str]:
    """Best language code of a text, or None when nothing was detected"""
    try:
        ranked = service.detect_all(text)
    except DetectionError as e:
        logger.debug("No detection for sample", error_code=e.error_code)
        return None
    return ranked[0].code if ranked else None


def evaluate_accuracies(
    service: LanguageDetectionService,
    dataset: Dict[str, List[str]],
    trials: Sequence[AccuracyTrial],
) -> List[AccuracyReport]:
    """
    Evaluate per-language accuracy for each trial row.

    Languages are processed in code order.
    """
    languages = sorted(dataset)
    reports = []
    for trial in trials:
        report = AccuracyReport(trial)
        for language in languages:
            texts = dataset[language]
            correct = 0
            for text in texts:
                for substring in substring_sample(
                    text, trial.substring_length, trial.sample_size
                ):
                    if top_language(service, substring) == language:
                        correct += 1
            accuracy = correct / (len(texts) * trial.sample_size)
            report.per_language[language] = accuracy
            logger.debug(
                "Language accuracy",
                substring_length=trial.substring_length,
                language=language,
                accuracy=accuracy,
            )
        logger.info(
            "Substring accuracy",
            substring_length=trial.substring_length,
            min=report.min_accuracy,
            mean=report.mean_accuracy,
            passed=report.passed,
        )
        reports.append(report)
    return reports
