"""
Configuration Package

- settings.py: environment-driven settings plus the fixed game rules
"""

from .settings import (
    Config, DevelopmentConfig, TestingConfig, config, get_config,
    MAX_ATTEMPTS, WORD_LENGTH, BUNDLED_WORDS_PATH, DEFAULT_STATS_URL,
)

__all__ = [
    "Config", "DevelopmentConfig", "TestingConfig", "config", "get_config",
    "MAX_ATTEMPTS", "WORD_LENGTH", "BUNDLED_WORDS_PATH", "DEFAULT_STATS_URL",
]
