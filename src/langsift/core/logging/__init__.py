"""
LangSift Logging Module - Structured Application Logging.

Components:
    - logger: Main logging configuration and factory functions

Output Formats:
    - JSON: Structured format for log aggregation systems
    - Text: Human-readable format for development and console output
    - Rich: Enhanced console output with colors and formatting

Example:
    >>> from langsift.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Detector ready", languages=12, variant="short-text")
"""

from .logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
