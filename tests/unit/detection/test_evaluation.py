"""
Unit tests for substring accuracy evaluation
"""

import pytest

from langsift.core.exceptions.custom_exceptions import ConfigurationError
from langsift.detection.evaluation import (
    UDHR_SHORT_TEXT_TRIALS,
    UDHR_TRIALS,
    AccuracyReport,
    AccuracyTrial,
    evaluate_accuracies,
    read_dataset,
    substring_sample,
    top_language,
)


class TestSubstringSample:
    """Test reproducible substring sampling"""

    def test_full_text_trial(self):
        assert substring_sample("  whole text  ", 0, 1) == ["  whole text  "]

    def test_sample_shape(self):
        sample = substring_sample("the quick brown fox jumps", 5, 20)
        assert len(sample) == 20
        assert all(len(substring) == 5 for substring in sample)
        assert all(substring.strip() for substring in sample)

    def test_sample_is_reproducible(self):
        text = "the quick brown fox jumps over the lazy dog"
        assert substring_sample(text, 7, 10) == substring_sample(text, 7, 10)

    def test_whitespace_only_substrings_skipped(self):
        sample = substring_sample("a          b", 1, 10)
        assert set(sample) <= {"a", "b"}

    def test_text_too_short(self):
        with pytest.raises(ValueError, match="too short"):
            substring_sample("  abc  ", 4, 1)

    @pytest.mark.parametrize("length,size", [(0, 5), (-1, 1), (3, 0)])
    def test_invalid_arguments(self, length, size):
        with pytest.raises(ValueError):
            substring_sample("some text", length, size)


class TestDataset:
    """Test dataset loading"""

    def test_read_dataset(self, sample_dataset):
        dataset = read_dataset(sample_dataset)
        assert sorted(dataset) == ["ab", "cd", "xx"]
        assert dataset["ab"] == ["abab abba baba bab"]

    def test_read_dataset_filters_languages(self, sample_dataset):
        dataset = read_dataset(sample_dataset, ["ab", "cd", "ef"])
        assert sorted(dataset) == ["ab", "cd"]

    def test_missing_dataset(self, tmp_path):
        with pytest.raises(ConfigurationError):
            read_dataset(tmp_path / "missing.tsv")


class TestEvaluateAccuracies:
    """Test per-language accuracy reports"""

    def test_report_properties(self):
        report = AccuracyReport(AccuracyTrial(5, 10, 0.5, 0.7))
        report.per_language.update({"ab": 0.5, "cd": 1.0})
        assert report.substring_length == 5
        assert report.min_accuracy == 0.5
        assert report.mean_accuracy == 0.75
        assert report.passed

    def test_empty_report_fails(self):
        report = AccuracyReport(AccuracyTrial(5, 10, 0.5, 0.7))
        assert report.min_accuracy == 0.0
        assert not report.passed

    def test_calibration_tables_end_with_full_text(self):
        for trials in (UDHR_TRIALS, UDHR_SHORT_TEXT_TRIALS):
            assert trials[-1] == AccuracyTrial(0, 1, 1.0, 1.0)
            lengths = [trial.substring_length for trial in trials[:-1]]
            assert lengths == sorted(lengths)

    def test_top_language(self, synthetic_service):
        assert top_language(synthetic_service, "abab") == "ab"
        assert top_language(synthetic_service, "123") is None

    def test_evaluate_accuracies(self, synthetic_service, sample_dataset):
        dataset = read_dataset(sample_dataset, synthetic_service.languages)
        trials = [AccuracyTrial(3, 5, 0.9, 0.9), AccuracyTrial(0, 1, 1.0, 1.0)]
        reports = evaluate_accuracies(synthetic_service, dataset, trials)
        assert len(reports) == 2
        for report in reports:
            assert report.per_language == {"ab": 1.0, "cd": 1.0}
            assert report.passed

    def test_evaluate_accuracies_failing_threshold(self, synthetic_service):
        dataset = {"ab": ["z z z z"]}
        reports = evaluate_accuracies(
            synthetic_service, dataset, [AccuracyTrial(0, 1, 1.0, 1.0)]
        )
        # A neutral text ties every language; ties go to the lowest code
        assert reports[0].per_language == {"ab": 1.0}

        reports = evaluate_accuracies(
            synthetic_service, {"cd": ["z z z z"]}, [AccuracyTrial(0, 1, 1.0, 1.0)]
        )
        assert reports[0].per_language == {"cd": 0.0}
        assert not reports[0].passed
