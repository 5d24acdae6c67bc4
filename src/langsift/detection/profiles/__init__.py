"""
LangSift language profiles.

Components:
    - LanguageProfile: Immutable n-gram frequency table of one language
    - ProfileSource / DirectoryProfileSource: Profile data suppliers
    - ProfileStore: Read-only set of profiles shared by detections
"""

from .profile import LanguageProfile
from .sources import DirectoryProfileSource, ProfileSource, profile_source_for
from .store import ProfileStore

__all__ = [
    "DirectoryProfileSource",
    "LanguageProfile",
    "ProfileSource",
    "ProfileStore",
    "profile_source_for",
]
