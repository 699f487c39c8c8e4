"""
Configuration helpers for the cozy scripts.
"""

from .models import AnswerOverrides, BuildConfig, ConfigError, load_answer_overrides, load_build_config
from .settings import Settings, get_settings

__all__ = [
    "AnswerOverrides",
    "BuildConfig",
    "ConfigError",
    "load_answer_overrides",
    "load_build_config",
    "Settings",
    "get_settings",
]
