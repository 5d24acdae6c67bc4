"""
CLI commands module for LangSift
"""

from . import detect, evaluate, profiles

__all__ = ["detect", "evaluate", "profiles"]
