"""
Configuration validation utilities for LangSift.

This module defines the explicit, statically validated configuration records
a detector is built from, and helpers that load them from YAML or JSON files.
Pydantic validation failures are always reported as ConfigurationError so
callers only deal with the LangSift exception hierarchy.

Records:
    DetectorConfig: Exactly the language subset and the profile variant
    DetectionParameters: Tuning constants of the Bayesian filtering classifier

Example Usage:
    >>> config = ConfigValidator.validate_config(
    ...     {"languages": ["en", "de"], "profile_variant": "short-text"}
    ... )
    >>> config.profile_variant
    <ProfileVariant.SHORT_TEXT: 'short-text'>

    >>> config = ConfigValidator.validate_file("detector.yaml")
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from langsift.core.config.settings import settings
from langsift.core.exceptions.custom_exceptions import ConfigurationError


class ProfileVariant(str, Enum):
    """Trained profile sets a store can be built from"""

    DEFAULT = "default"
    SHORT_TEXT = "short-text"


class DetectorConfig(BaseModel):
    """
    Detector construction record.

    Attributes:
        languages: Language codes to enable, sorted and de-duplicated.
            Empty means every language the selected variant supplies.
        profile_variant: Profile set the store is built from
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    languages: Tuple[str, ...] = ()
    profile_variant: ProfileVariant = ProfileVariant.DEFAULT

    @field_validator("languages", mode="before")
    @classmethod
    def normalize_languages(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        codes = {str(code).strip() for code in v}
        codes.discard("")
        return tuple(sorted(codes))

    @field_validator("profile_variant", mode="before")
    @classmethod
    def blank_variant_is_default(cls, v):
        # An empty profile name selects the default variant
        if v is None or v == "":
            return ProfileVariant.DEFAULT
        return v

    @classmethod
    def from_settings(cls) -> "DetectorConfig":
        """Build the record from the application settings"""
        return ConfigValidator.validate_config(
            {
                "languages": settings.DEFAULT_LANGUAGES,
                "profile_variant": settings.PROFILE_VARIANT,
            }
        )


class DetectionParameters(BaseModel):
    """Tuning constants for the randomized Bayesian filtering classifier"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    number_of_trials: int = Field(default=7, ge=1)
    alpha: float = Field(default=0.5, gt=0)
    alpha_width: float = Field(default=0.05, ge=0)
    base_frequency: float = Field(default=10000.0, gt=0)
    iteration_limit: int = Field(default=1000, ge=1)
    convergence_check_interval: int = Field(default=5, ge=1)
    conv_threshold: float = Field(default=0.99999, gt=0, le=1)
    prob_threshold: float = Field(default=0.001, ge=0, le=1)
    max_text_length: int = Field(default=10000, ge=1)
    trial_workers: int = Field(default=1, ge=1)

    @classmethod
    def from_settings(cls) -> "DetectionParameters":
        """Build the parameters from the application settings"""
        return ConfigValidator.validate_parameters(
            {
                "number_of_trials": settings.NUMBER_OF_TRIALS,
                "alpha": settings.ALPHA,
                "alpha_width": settings.ALPHA_WIDTH,
                "base_frequency": settings.BASE_FREQUENCY,
                "iteration_limit": settings.ITERATION_LIMIT,
                "convergence_check_interval": settings.CONVERGENCE_CHECK_INTERVAL,
                "conv_threshold": settings.CONV_THRESHOLD,
                "prob_threshold": settings.PROB_THRESHOLD,
                "max_text_length": settings.MAX_TEXT_LENGTH,
                "trial_workers": settings.TRIAL_WORKERS,
            }
        )

    def fingerprint(self) -> str:
        """Stable text form of the parameters that shape a trial's outcome"""
        return (
            f"trials={self.number_of_trials};alpha={self.alpha!r};"
            f"width={self.alpha_width!r};base={self.base_frequency!r};"
            f"limit={self.iteration_limit};check={self.convergence_check_interval};"
            f"conv={self.conv_threshold!r}"
        )


class ConfigValidator:
    """Configuration validator for detector configs"""

    @staticmethod
    def load_config(file_path: str) -> Dict[str, Any]:
        """Load configuration from file"""
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        suffix = path.suffix.lower()
        if suffix not in [".yaml", ".yml", ".json"]:
            raise ConfigurationError(f"Unsupported file format: {path.suffix}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> DetectorConfig:
        """Validate detector configuration"""
        try:
            return DetectorConfig(**config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                error_code="INVALID_DETECTOR_CONFIG",
                details={"config": config},
            ) from e

    @staticmethod
    def validate_parameters(parameters: Dict[str, Any]) -> DetectionParameters:
        """Validate detection parameters"""
        try:
            return DetectionParameters(**parameters)
        except ValidationError as e:
            raise ConfigurationError(
                f"Detection parameter validation failed: {e}",
                error_code="INVALID_DETECTION_PARAMETERS",
                details={"parameters": parameters},
            ) from e

    @staticmethod
    def validate_file(file_path: str) -> Tuple[DetectorConfig, DetectionParameters]:
        """
        Load and validate a configuration file.

        The file holds the detector record at the top level and an optional
        ``parameters`` mapping; parameters missing from the file fall back to
        the application settings.
        """
        data = dict(ConfigValidator.load_config(file_path))
        overrides = data.pop("parameters", None) or {}
        if not isinstance(overrides, dict):
            raise ConfigurationError("'parameters' must be a mapping")
        config = ConfigValidator.validate_config(data)
        defaults = DetectionParameters.from_settings().model_dump()
        defaults.update(overrides)
        return config, ConfigValidator.validate_parameters(defaults)
