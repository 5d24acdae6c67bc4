"""
Profile data suppliers.

A ProfileSource hands trained language profiles to the ProfileStore. The
training process is out of scope; sources only read finished profiles.

Available Sources:
    - DirectoryProfileSource: One langdetect-format JSON file per language,
      named after the language code (with or without a ``.json`` suffix)

The default profile variant is the profile set bundled with the langdetect
distribution unless PROFILE_DIR points elsewhere. The short-text variant is
read from SHORT_TEXT_PROFILE_DIR.

Example:
    >>> source = profile_source_for(ProfileVariant.DEFAULT)
    >>> "en" in source.available_languages()
    True
    >>> source.load("en").total(1)
"""

import json
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Union

from langsift.core.config.settings import settings
from langsift.core.config.validation import ProfileVariant
from langsift.core.exceptions.custom_exceptions import (
    ConfigurationError,
    ProfileDataError,
)
from langsift.core.logging.logger import get_logger
from langsift.detection.profiles.profile import LanguageProfile

logger = get_logger(__name__)

PROFILE_SUFFIX = ".json"


class ProfileSource(ABC):
    """Abstract supplier of trained language profiles"""

    @property
    @abstractmethod
    def description(self) -> str:
        """Where the profiles come from, for logs and CLI output"""
        pass

    @abstractmethod
    def available_languages(self) -> List[str]:
        """Sorted language codes this source has profiles for"""
        pass

    @abstractmethod
    def load(self, code: str) -> LanguageProfile:
        """
        Load the profile of one language.

        Raises:
            ConfigurationError: If the source has no profile for the code
            ProfileDataError: If the stored profile is malformed
        """
        pass


class DirectoryProfileSource(ProfileSource):
    """
    Reads langdetect-format JSON profiles from a directory.

    Args:
        directory: Filesystem path or importlib.resources traversable
    """

    def __init__(self, directory: Union[str, Path, Any]):
        self.directory = Path(directory) if isinstance(directory, str) else directory
        if not self.directory.is_dir():
            raise ConfigurationError(
                f"Profile directory not found: {self.directory}",
                error_code="PROFILE_DIR_MISSING",
                details={"directory": str(self.directory)},
            )
        self._files = self._index_files()

    @property
    def description(self) -> str:
        return str(self.directory)

    def _index_files(self) -> Dict[str, Any]:
        files = {}
        for entry in self.directory.iterdir():
            if not entry.is_file() or entry.name.startswith((".", "_")):
                continue
            code = entry.name
            if code.endswith(PROFILE_SUFFIX):
                code = code[: -len(PROFILE_SUFFIX)]
            files[code] = entry
        return files

    def available_languages(self) -> List[str]:
        return sorted(self._files)

    def load(self, code: str) -> LanguageProfile:
        entry = self._files.get(code)
        if entry is None:
            raise ConfigurationError(
                f"No profile for language code: {code}",
                error_code="UNKNOWN_LANGUAGE",
                details={"code": code, "directory": self.description},
            )
        try:
            data = json.loads(entry.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ProfileDataError(
                f"Failed to read profile {code!r}: {e}",
                details={"code": code, "path": str(entry)},
            ) from e
        return LanguageProfile.from_dict(data, code=code)


def bundled_profile_directory() -> Any:
    """Profile directory shipped inside the langdetect distribution"""
    return resources.files("langdetect").joinpath("profiles")


def profile_source_for(variant: ProfileVariant) -> ProfileSource:
    """
    Resolve the configured profile source of a variant.

    Raises:
        ConfigurationError: If the variant has no profile data configured
    """
    variant = ProfileVariant(variant)
    if variant is ProfileVariant.SHORT_TEXT:
        if not settings.SHORT_TEXT_PROFILE_DIR:
            raise ConfigurationError(
                "The short-text profile variant needs SHORT_TEXT_PROFILE_DIR",
                error_code="PROFILE_VARIANT_UNAVAILABLE",
                details={"variant": variant.value},
            )
        return DirectoryProfileSource(settings.SHORT_TEXT_PROFILE_DIR)

    if settings.PROFILE_DIR:
        return DirectoryProfileSource(settings.PROFILE_DIR)
    logger.debug("Using bundled langdetect profiles")
    return DirectoryProfileSource(bundled_profile_directory())
