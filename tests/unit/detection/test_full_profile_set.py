"""
Detection with every bundled langdetect profile loaded
"""

from pathlib import Path

import pytest

from langsift.detection.evaluation import UDHR_TRIALS, evaluate_accuracies, read_dataset

FIXTURE = Path(__file__).parents[2] / "fixtures" / "udhr_preambles.tsv"
PREAMBLES = {code: texts[0] for code, texts in read_dataset(FIXTURE).items()}


def test_full_set_is_loaded(full_service):
    assert len(full_service.languages) >= 50
    assert {"af", "nl", "zh-cn", "zh-tw", "pt", "es"} <= set(full_service.languages)


@pytest.mark.parametrize("code", sorted(PREAMBLES))
def test_long_native_text(full_service, code):
    text = PREAMBLES[code]
    assert len(text) >= 300
    assert full_service.detect(text) == code


def test_english_pangram(full_service):
    assert full_service.detect("The quick brown fox jumps over the lazy dog") == "en"


@pytest.mark.parametrize(
    "trial",
    [trial for trial in UDHR_TRIALS if trial.substring_length in (0, 100, 300)],
    ids=lambda trial: f"length-{trial.substring_length}",
)
def test_udhr_calibration_rows(full_service, trial):
    dataset = read_dataset(FIXTURE, full_service.languages)
    assert len(dataset) == len(PREAMBLES)
    (report,) = evaluate_accuracies(full_service, dataset, [trial])
    assert report.passed, report.per_language
