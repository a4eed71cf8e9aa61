"""
Game Logger Module

Structured logging for game events, rejected guesses, statistics updates
and errors. Every entry is a single JSON object so log files are easy to
grep and parse.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union


class GameLogger:
    """
    Thin wrapper around the `nulldle` logger.

    Nothing is attached until `configure()` is called, so library users keep
    control over handlers; the apps call it once at startup.
    """

    def __init__(self, name: str = "nulldle"):
        self.logger = logging.getLogger(name)

    def configure(self, level: Union[str, int] = "INFO",
                  log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
        """Attach a console handler (warnings and up) and an optional dated file handler."""
        logger = self.logger
        logger.setLevel(level)

        # Prevent duplicate handlers on repeated configure()
        if logger.handlers:
            logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self, event_type: str, action: str, details: Dict[str, Any]) -> str:
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "action": action,
            "details": details,
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_game_event(self, event: str, **kwargs):
        """
        Log session lifecycle events.

        Args:
            event: e.g. 'game_started', 'guess_accepted', 'game_won', 'game_lost'
            **kwargs: event details
        """
        self.logger.info(self._create_log_entry("GAME_EVENT", event, kwargs))

    def log_rejection(self, reason: str, **kwargs):
        """Log a guess that was refused without consuming an attempt."""
        self.logger.info(self._create_log_entry("REJECTION", reason, kwargs))

    def log_stats_update(self, action: str, **kwargs):
        self.logger.debug(self._create_log_entry("STATS", action, kwargs))

    def log_error(self, error: Exception, action: str, **kwargs):
        details = {
            "error_type": type(error).__name__,
            "error_message": str(error),
            **kwargs,
        }
        self.logger.error(self._create_log_entry("ERROR", action, details))


# Shared instance
game_logger = GameLogger()
