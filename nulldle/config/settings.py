"""
Configuration Management Module

All runtime settings come from environment variables (optionally loaded
from a `.env` file in the working directory) with sensible defaults.
Game rules that must not change, like the attempt limit, are constants.
"""

import os
from pathlib import Path
from typing import Final, Optional

from dotenv import load_dotenv

load_dotenv()

# Fixed game rules
MAX_ATTEMPTS: Final[int] = 6
WORD_LENGTH: Final[int] = 5

BUNDLED_WORDS_PATH: Final[str] = str(Path(__file__).resolve().parent.parent / "datasets" / "data" / "words_5.txt")
DEFAULT_STATS_URL: Final[str] = str(Path.home() / ".nulldle" / "stats.json")


def _env_path(name: str) -> Optional[str]:
    value = os.getenv(name)
    return os.path.expanduser(value) if value else None


class Config:
    """Base configuration, read when the class body is evaluated."""

    # Word source
    WORDS_PATH = _env_path("NULLDLE_WORDS_PATH") or BUNDLED_WORDS_PATH
    ANSWERS_PATH = _env_path("NULLDLE_ANSWERS_PATH")
    WORD_LENGTH = int(os.getenv("NULLDLE_WORD_LENGTH", WORD_LENGTH))

    # Statistics persistence: memory://, sqlite:///file.db or a JSON path
    STATS_URL = os.getenv("NULLDLE_STATS_URL", DEFAULT_STATS_URL)

    # Logging
    LOG_LEVEL = os.getenv("NULLDLE_LOG_LEVEL", "INFO")
    LOG_DIR = _env_path("NULLDLE_LOG_DIR")


class DevelopmentConfig(Config):
    LOG_LEVEL = "DEBUG"


class TestingConfig(Config):
    STATS_URL = "memory://"
    LOG_DIR = None
    WORDS_PATH = BUNDLED_WORDS_PATH
    ANSWERS_PATH = None


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(name: Optional[str] = None):
    """Resolve a config class by name (falls back to NULLDLE_ENV, then default)."""
    name = name or os.getenv("NULLDLE_ENV", "default")
    try:
        return config[name]
    except KeyError as e:
        raise ValueError(f"Unknown config: {name}. Available: {sorted(config)}") from e
