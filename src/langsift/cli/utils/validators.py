"""
CLI input validation utilities for LangSift commands.

These helpers validate user-provided parameters before any profile data is
loaded, so bad input fails fast with a clear message.

Example Usage:
    >>> validate_file_path("udhr.tsv", required_extensions=[".tsv", ".txt"])
    PosixPath('udhr.tsv')
    >>> parse_language_list("en, de ,fr")
    ['de', 'en', 'fr']
"""

from pathlib import Path
from typing import List, Optional, Union

from langsift.core.config.validation import ProfileVariant
from langsift.core.exceptions.custom_exceptions import ValidationError
from langsift.core.logging.logger import get_logger

logger = get_logger(__name__)


def validate_file_path(
    file_path: Union[str, Path],
    must_exist: bool = True,
    required_extensions: Optional[List[str]] = None,
) -> Path:
    """
    Validate file path.

    Args:
        file_path: Path to validate
        must_exist: Whether file must already exist
        required_extensions: List of allowed file extensions

    Returns:
        Path: Validated Path object

    Raises:
        ValidationError: If validation fails
    """
    path_obj = Path(file_path)

    if must_exist and not path_obj.exists():
        raise ValidationError(f"File does not exist: {file_path}")

    if required_extensions:
        if path_obj.suffix.lower() not in required_extensions:
            raise ValidationError(
                f"Invalid file extension. Expected: {required_extensions}, "
                f"got: {path_obj.suffix}"
            )

    if must_exist and not path_obj.is_file():
        raise ValidationError(f"Path is not a readable file: {file_path}")

    return path_obj


def parse_language_list(value: Optional[str]) -> List[str]:
    """Split a comma separated list of language codes"""
    if not value:
        return []
    return sorted({code.strip() for code in value.split(",") if code.strip()})


def validate_profile_variant(value: Optional[str]) -> Optional[str]:
    """
    Validate a profile variant name.

    Returns:
        Optional[str]: The variant, or None to use the configured default

    Raises:
        ValidationError: If the name is not a known variant
    """
    if value is None:
        return None
    known = [variant.value for variant in ProfileVariant]
    if value not in known:
        raise ValidationError(f"Unknown profile variant {value!r}. Expected: {known}")
    return value
