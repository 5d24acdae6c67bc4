"""
Detector construction from command line options.
"""

from typing import Any, Dict, Optional

from langsift.cli.utils.validators import (
    parse_language_list,
    validate_file_path,
    validate_profile_variant,
)
from langsift.core.config.validation import ConfigValidator
from langsift.detection.service import LanguageDetectionService, new_detector


def build_service(
    languages: Optional[str] = None,
    profile: Optional[str] = None,
    trials: Optional[int] = None,
    config_file: Optional[str] = None,
) -> LanguageDetectionService:
    """
    Build a detection service, falling back to settings for unset options.

    Options given on the command line take precedence over a YAML or JSON
    detector config file.

    Raises:
        ValidationError: For an unknown profile variant name or missing file
        ConfigurationError: For unknown language codes or an invalid config
    """
    config = None
    parameters: Optional[Dict[str, Any]] = None
    if config_file:
        path = validate_file_path(
            config_file, required_extensions=[".yaml", ".yml", ".json"]
        )
        config, loaded = ConfigValidator.validate_file(str(path))
        parameters = loaded.model_dump()

    overrides: Dict[str, Any] = {}
    codes = parse_language_list(languages)
    if codes:
        overrides["languages"] = codes
    variant = validate_profile_variant(profile)
    if variant is not None:
        overrides["profile_variant"] = variant
    if trials is not None:
        parameters = dict(parameters or {}, number_of_trials=trials)
    return new_detector(config, parameters, **overrides)
