"""
Pytest configuration and fixtures for LangSift tests
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from langsift.core.config.settings import Settings, settings
from langsift.detection.profiles.sources import (
    DirectoryProfileSource,
    bundled_profile_directory,
)
from langsift.detection.service import new_detector

# Toy languages with disjoint alphabets; each sees "z" at the same rate,
# so "z" alone carries no evidence
SYNTHETIC_PROFILES: Dict[str, Dict[str, Any]] = {
    "ab": {
        "name": "ab",
        "freq": {"a": 100, "b": 70, "z": 10, "ab": 60, "ba": 40, "aba": 30, "bab": 20},
        "n_words": [180, 100, 50],
    },
    "cd": {
        "name": "cd",
        "freq": {"c": 100, "d": 70, "z": 10, "cd": 60, "dc": 40, "cdc": 30, "dcd": 20},
        "n_words": [180, 100, 50],
    },
    "ef": {
        "name": "ef",
        "freq": {"e": 100, "f": 70, "z": 10, "ef": 60, "fe": 40, "efe": 30, "fef": 20},
        "n_words": [180, 100, 50],
    },
}


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Settings with debug logging for tests"""
    return Settings(
        ENVIRONMENT="testing",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def synthetic_profiles() -> Dict[str, Dict[str, Any]]:
    return SYNTHETIC_PROFILES


@pytest.fixture
def profile_dir(tmp_path: Path) -> Path:
    """Directory of synthetic langdetect-format profiles"""
    directory = tmp_path / "profiles"
    directory.mkdir()
    for code, data in SYNTHETIC_PROFILES.items():
        (directory / code).write_text(json.dumps(data), encoding="utf-8")
    return directory


@pytest.fixture
def profile_source(profile_dir: Path) -> DirectoryProfileSource:
    return DirectoryProfileSource(profile_dir)


@pytest.fixture
def synthetic_service(profile_source):
    """Detection service over the synthetic profiles"""
    return new_detector(source=profile_source)


@pytest.fixture
def configured_profiles(monkeypatch, profile_dir: Path) -> Path:
    """Point the default profile variant at the synthetic profiles"""
    monkeypatch.setattr(settings, "PROFILE_DIR", str(profile_dir))
    monkeypatch.setattr(settings, "DEFAULT_LANGUAGES", [])
    monkeypatch.setattr(settings, "PROFILE_VARIANT", "default")
    return profile_dir


@pytest.fixture(scope="session")
def bundled_service():
    """Detection service over a subset of the bundled langdetect profiles"""
    return new_detector(
        languages=["de", "en", "es", "fr", "ja", "ko", "ru", "zh-cn"],
        profile_variant="default",
        source=DirectoryProfileSource(bundled_profile_directory()),
    )


@pytest.fixture
def sample_dataset(tmp_path: Path) -> Path:
    """Tab-separated dataset in the synthetic languages"""
    content = "\n".join(
        [
            "ab\tabab abba baba bab",
            "cd\tcdcd dccd cdc dcdc",
            "xx\tunsupported language row",
            "malformed row without a tab",
        ]
    )
    path = tmp_path / "dataset.tsv"
    path.write_text(content + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def full_service():
    """Detection service over every bundled langdetect profile"""
    return new_detector(
        languages=[],
        profile_variant="default",
        source=DirectoryProfileSource(bundled_profile_directory()),
    )
