"""
Unit tests for language profiles, profile sources and the profile store
"""

import json

import numpy as np
import pytest

from langsift.core.config.settings import settings
from langsift.core.config.validation import ProfileVariant
from langsift.core.exceptions.custom_exceptions import (
    ConfigurationError,
    ProfileDataError,
)
from langsift.detection.profiles import (
    DirectoryProfileSource,
    LanguageProfile,
    ProfileStore,
    profile_source_for,
)
from langsift.detection.service import new_detector


class TestLanguageProfile:
    """Test profile parsing and lookups"""

    def test_from_dict(self, synthetic_profiles):
        profile = LanguageProfile.from_dict(synthetic_profiles["ab"], code="ab")
        assert profile.code == "ab"
        assert profile.frequency("a") == 100
        assert profile.frequency("ab") == 60
        assert profile.frequency("aba") == 30
        assert profile.total(1) == 180
        assert profile.total(3) == 50
        assert set(profile.vocabulary(2)) == {"ab", "ba"}
        assert len(profile) == 7

    def test_unseen_ngrams_have_zero_frequency(self, synthetic_profiles):
        profile = LanguageProfile.from_dict(synthetic_profiles["ab"])
        assert profile.frequency("q") == 0
        assert profile.frequency("") == 0
        assert profile.frequency("abab") == 0

    def test_long_ngrams_ignored(self):
        data = {"name": "xx", "freq": {"x": 1, "xxxx": 9}, "n_words": [1, 0, 0]}
        profile = LanguageProfile.from_dict(data)
        assert len(profile) == 1

    def test_tables_are_read_only(self, synthetic_profiles):
        profile = LanguageProfile.from_dict(synthetic_profiles["ab"])
        with pytest.raises(TypeError):
            profile.frequencies[0]["a"] = 1

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"name": "ab", "n_words": [1, 1, 1]},
            {"name": "ab", "freq": {}, "n_words": [1, 1]},
            {"name": "ab", "freq": {"a": -1}, "n_words": [1, 1, 1]},
            {"name": "ab", "freq": {"a": "many"}, "n_words": [1, 1, 1]},
            {"name": "ab", "freq": {"a": 1}, "n_words": [1, "x", 1]},
        ],
    )
    def test_malformed_profiles(self, data):
        with pytest.raises(ProfileDataError):
            LanguageProfile.from_dict(data, code="ab")

    def test_name_must_match_code(self, synthetic_profiles):
        with pytest.raises(ProfileDataError):
            LanguageProfile.from_dict(synthetic_profiles["ab"], code="cd")


class TestDirectoryProfileSource:
    """Test reading profiles from a directory"""

    def test_available_languages(self, profile_dir):
        (profile_dir / ".hidden").write_text("{}")
        (profile_dir / "_notes").write_text("{}")
        source = DirectoryProfileSource(profile_dir)
        assert source.available_languages() == ["ab", "cd", "ef"]

    def test_json_suffix_is_optional(self, tmp_path):
        (tmp_path / "gh.json").write_text(
            json.dumps({"name": "gh", "freq": {"g": 1}, "n_words": [1, 0, 0]})
        )
        source = DirectoryProfileSource(tmp_path)
        assert source.available_languages() == ["gh"]
        assert source.load("gh").frequency("g") == 1

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc:
            DirectoryProfileSource(tmp_path / "missing")
        assert exc.value.error_code == "PROFILE_DIR_MISSING"

    def test_unknown_language(self, profile_source):
        with pytest.raises(ConfigurationError) as exc:
            profile_source.load("zz")
        assert exc.value.error_code == "UNKNOWN_LANGUAGE"

    def test_invalid_json(self, profile_dir):
        (profile_dir / "bad").write_text("{not json")
        with pytest.raises(ProfileDataError):
            DirectoryProfileSource(profile_dir).load("bad")

    def test_short_text_needs_directory(self, monkeypatch):
        monkeypatch.setattr(settings, "SHORT_TEXT_PROFILE_DIR", None)
        with pytest.raises(ConfigurationError) as exc:
            profile_source_for(ProfileVariant.SHORT_TEXT)
        assert exc.value.error_code == "PROFILE_VARIANT_UNAVAILABLE"

    def test_short_text_directory(self, monkeypatch, profile_dir):
        monkeypatch.setattr(settings, "SHORT_TEXT_PROFILE_DIR", str(profile_dir))
        source = profile_source_for(ProfileVariant.SHORT_TEXT)
        assert source.available_languages() == ["ab", "cd", "ef"]

    def test_short_text_store_records_variant(self, monkeypatch, profile_dir):
        monkeypatch.setattr(settings, "SHORT_TEXT_PROFILE_DIR", str(profile_dir))
        store = ProfileStore.load(["ab", "cd"], variant=ProfileVariant.SHORT_TEXT)
        assert store.variant is ProfileVariant.SHORT_TEXT
        assert store.languages == ("ab", "cd")

    def test_short_text_service(self, monkeypatch, profile_dir):
        monkeypatch.setattr(settings, "SHORT_TEXT_PROFILE_DIR", str(profile_dir))
        service = new_detector(languages=[], profile_variant="short-text")
        assert service.store.variant is ProfileVariant.SHORT_TEXT
        assert service.describe()["profile_variant"] == "short-text"
        assert service.detect("abab baba") == "ab"

    def test_profile_dir_overrides_bundled(self, configured_profiles):
        source = profile_source_for(ProfileVariant.DEFAULT)
        assert source.description == str(configured_profiles)

    def test_bundled_profiles(self, monkeypatch):
        monkeypatch.setattr(settings, "PROFILE_DIR", None)
        source = profile_source_for(ProfileVariant.DEFAULT)
        codes = source.available_languages()
        assert {"en", "de", "fr", "zh-cn", "ja"} <= set(codes)
        assert source.load("en").total(1) > 0


class TestProfileStore:
    """Test the read-only profile store"""

    def test_load_subset(self, profile_source):
        store = ProfileStore.load(["cd", "ab", "ab"], source=profile_source)
        assert store.languages == ("ab", "cd")
        assert len(store) == 2
        assert "ab" in store
        assert "ef" not in store
        assert store.variant is ProfileVariant.DEFAULT

    def test_empty_selection_loads_everything(self, profile_source):
        store = ProfileStore.load([], source=profile_source)
        assert store.languages == ("ab", "cd", "ef")

    def test_unknown_language(self, profile_source):
        with pytest.raises(ConfigurationError) as exc:
            ProfileStore.load(["ab", "zz"], source=profile_source)
        assert exc.value.error_code == "UNKNOWN_LANGUAGE"
        assert exc.value.details["unknown"] == ["zz"]

    def test_unknown_variant(self, profile_source):
        with pytest.raises(ConfigurationError) as exc:
            ProfileStore.load(["ab"], variant="tiny", source=profile_source)
        assert exc.value.error_code == "UNKNOWN_PROFILE_VARIANT"

    def test_lookups(self, profile_source):
        store = ProfileStore.load(source=profile_source)
        assert store.frequency("ab", "ab") == 60
        assert store.frequency("cd", "ab") == 0
        np.testing.assert_array_equal(store.frequencies("z"), [10.0, 10.0, 10.0])
        np.testing.assert_array_equal(store.totals(2), [100.0, 100.0, 100.0])
        assert store.vocabulary_size(1) == 7
        assert store.vocabulary_size(2) == 6
        with pytest.raises(KeyError):
            store.frequency("zz", "a")

    def test_known_ngrams(self, profile_source):
        store = ProfileStore.load(["ab", "cd"], source=profile_source)
        assert store.is_known("ab")
        assert not store.is_known("ef")
        assert not store.is_known("")
        assert store.known(["a", "q", "dc", "abab", "z"]) == ["a", "dc", "z"]

    def test_store_is_read_only(self, profile_source):
        store = ProfileStore.load(source=profile_source)
        totals = store.totals(1)
        with pytest.raises(ValueError):
            totals[0] = 0.0

    def test_duplicate_profiles(self, synthetic_profiles):
        profile = LanguageProfile.from_dict(synthetic_profiles["ab"])
        with pytest.raises(ConfigurationError) as exc:
            ProfileStore([profile, profile])
        assert exc.value.error_code == "DUPLICATE_PROFILE"

    def test_empty_store(self):
        with pytest.raises(ConfigurationError) as exc:
            ProfileStore([])
        assert exc.value.error_code == "EMPTY_PROFILE_STORE"
