"""
Custom exception hierarchy for LangSift error handling.

This module defines a structured exception hierarchy that carries error codes
and contextual details for every failure the detection engine reports. All
failures are raised synchronously to the immediate caller; the engine never
falls back to a default language.

Exception Hierarchy:
    LangSiftError (base)
    ├── ConfigurationError: Unknown language codes, variants or bad settings
    │   └── ProfileDataError: Missing or malformed profile data
    ├── ValidationError: Invalid command line input
    └── DetectionError: Call-time detection failures
        ├── EvidenceError: The text yields no usable n-grams
        └── NoConfidentResultError: No language cleared the report threshold

Construction-time configuration errors are fatal for the detector being built.
Call-time errors are scoped to a single call and never affect shared state.

Example:
    >>> try:
    ...     service.detect("12345")
    ... except EvidenceError as e:
    ...     logger.warning("Nothing to detect", error_code=e.error_code)
    >>>
    >>> raise ConfigurationError(
    ...     "Unknown language code",
    ...     error_code="UNKNOWN_LANGUAGE",
    ...     details={"languages": ["xx"]}
    ... )
"""

from typing import Any, Dict, Optional


class LangSiftError(Exception):
    """
    Base exception class for all LangSift errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier
        details (Dict[str, Any]): Additional contextual information

    The error_code defaults to the class name when not specified and is
    used for error categorization in logs and CLI output.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(LangSiftError):
    """
    Raised when detector configuration or settings are invalid.

    Common scenarios:
        - Language codes with no stored profile
        - Unknown profile variant
        - A profile variant whose data directory is not configured
        - YAML/JSON parsing errors in config files

    Example:
        >>> raise ConfigurationError(
        ...     "No profile for language codes: xx",
        ...     error_code="UNKNOWN_LANGUAGE",
        ...     details={"unknown": ["xx"], "variant": "default"}
        ... )
    """

    pass


class ProfileDataError(ConfigurationError):
    """Raised when a stored language profile cannot be read or is malformed"""

    pass


class ValidationError(LangSiftError):
    """Raised when command line input validation fails"""

    pass


class DetectionError(LangSiftError):
    """Base class for errors raised by a single detection call"""

    pass


class EvidenceError(DetectionError):
    """
    Raised when the input text yields zero usable n-grams.

    This covers empty and whitespace-only input, text made only of digits
    or symbols, and text whose n-grams appear in none of the loaded profiles.
    """

    pass


class NoConfidentResultError(DetectionError):
    """
    Raised when evidence existed but no language cleared the report threshold.

    Callers may treat this as "unknown language" rather than a failure.
    """

    pass
