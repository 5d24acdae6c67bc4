"""
Core configuration management for LangSift.

This module provides centralized configuration management using Pydantic settings
with support for environment variables, type validation, and sensible defaults
for the detection engine and its logging.

Classes:
    Settings: Main configuration class with all application settings

Environment Variables:
    Application settings can be overridden using environment variables with the
    same names as the class attributes (case-sensitive).

Example:
    >>> from langsift.core.config.settings import Settings
    >>> settings = Settings(PROFILE_VARIANT="short-text")
    >>> print(settings.NUMBER_OF_TRIALS)
    7

Configuration Sections:
    - Application: Basic app configuration (name, version, environment)
    - Logging: Application logging configuration
    - Profiles: Language subset, profile variant and profile data locations
    - Detection: Tuning constants of the Bayesian filtering classifier
"""

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables using the
    same name as the attribute. For example, the NUMBER_OF_TRIALS environment
    variable overrides the number of randomized trials per detection.

    Attributes:
        APP_NAME: Application name identifier
        APP_VERSION: Current application version
        ENVIRONMENT: Deployment environment (development/staging/production)
        DEBUG: Enable debug mode with verbose logging

        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        LOG_FORMAT: Log format (json/text)
        LOG_FILE_PATH: Path for log file output (optional)

        DEFAULT_LANGUAGES: Language codes enabled when a detector is built
            without an explicit list (empty means every available profile)
        PROFILE_VARIANT: Profile variant used by default (default/short-text)
        PROFILE_DIR: Directory overriding the bundled default profiles
        SHORT_TEXT_PROFILE_DIR: Directory holding the short-text profiles

        NUMBER_OF_TRIALS: Independent randomized trials averaged per detection
        ALPHA: Smoothing mass added to every likelihood, per BASE_FREQUENCY n-grams
        ALPHA_WIDTH: Standard deviation of the per-trial jitter applied to ALPHA
        BASE_FREQUENCY: N-gram count the smoothing mass ALPHA is spread over
        ITERATION_LIMIT: Maximum n-gram draws per trial
        CONVERGENCE_CHECK_INTERVAL: Draws between convergence checks
        CONV_THRESHOLD: Top probability that stops a trial early
        PROB_THRESHOLD: Minimum probability reported in results
        MAX_TEXT_LENGTH: Input characters considered per detection
        TRIAL_WORKERS: Threads used to run trials (1 runs them inline)
    """

    # Application
    APP_NAME: str = "LangSift"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE_PATH: Optional[str] = None

    # Profile Configuration
    DEFAULT_LANGUAGES: List[str] = []
    PROFILE_VARIANT: str = "default"
    PROFILE_DIR: Optional[str] = None
    SHORT_TEXT_PROFILE_DIR: Optional[str] = None

    # Detection Configuration
    NUMBER_OF_TRIALS: int = 7
    ALPHA: float = 0.5
    ALPHA_WIDTH: float = 0.05
    BASE_FREQUENCY: float = 10000.0
    ITERATION_LIMIT: int = 1000
    CONVERGENCE_CHECK_INTERVAL: int = 5
    CONV_THRESHOLD: float = 0.99999
    PROB_THRESHOLD: float = 0.001
    MAX_TEXT_LENGTH: int = 10000
    TRIAL_WORKERS: int = 1

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate logging level is a supported value.

        Ensures the log level is one of the standard Python logging
        levels. Converts to uppercase for consistency.

        Args:
            v (str): The log level value to validate

        Returns:
            str: The validated and normalized log level

        Raises:
            ValueError: If log level is not supported
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("DEFAULT_LANGUAGES", mode="before")
    @classmethod
    def split_languages(cls, v):
        """Accept a comma separated string as well as a JSON list."""
        if isinstance(v, str):
            return [code.strip() for code in v.split(",") if code.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # This will ignore extra fields from environment
    )


def get_settings() -> Settings:
    """Get application settings instance"""
    return Settings()


settings = Settings()
