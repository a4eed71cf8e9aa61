"""
Statistics store.

Every operation is a read-modify-write of the WHOLE record under one lock,
and the backend writes the record in one transaction, so:

  - concurrent record_win / record_loss calls cannot lose increments
  - load() only ever sees fully committed records
  - a write that started before a load() on the same store is visible to it

Failures surface as StorageUnavailable; callers treat them as non-fatal to
gameplay.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from nulldle.utils import game_logger
from .backends import KeyValueBackend, MemoryBackend, StorageUnavailable, open_backend
from .record import StatsRecord


class StatsStore:
    def __init__(self, backend: KeyValueBackend | None = None):
        self.backend = backend if backend is not None else MemoryBackend()
        self._lock = threading.RLock()

    @classmethod
    def from_url(cls, url: str) -> "StatsStore":
        return cls(open_backend(url))

    # ---- reads ----

    def load(self) -> StatsRecord:
        """Current record; all zero if nothing was stored yet."""
        with self._lock:
            return self._read()

    # ---- writes ----

    def record_win(self, guesses_used: int, incorrect_attempts: int) -> StatsRecord:
        _check_non_negative(guesses_used=guesses_used, incorrect_attempts=incorrect_attempts)
        return self._update("record_win", lambda r: r.with_win(guesses_used, incorrect_attempts))

    def record_loss(self, incorrect_attempts: int) -> StatsRecord:
        _check_non_negative(incorrect_attempts=incorrect_attempts)
        return self._update("record_loss", lambda r: r.with_loss(incorrect_attempts))

    def reset_all(self) -> StatsRecord:
        return self._update("reset_all", lambda r: StatsRecord())

    # ---- internals ----

    def _read(self) -> StatsRecord:
        try:
            return StatsRecord.from_mapping(self.backend.read())
        except StorageUnavailable as e:
            game_logger.log_error(e, "stats_load")
            raise

    def _update(self, action: str, change: Callable[[StatsRecord], StatsRecord]) -> StatsRecord:
        t0 = time.perf_counter_ns()
        with self._lock:
            new = change(self._read())
            try:
                self.backend.write(new.to_dict())
            except StorageUnavailable as e:
                game_logger.log_error(e, action)
                raise
        ms = (time.perf_counter_ns() - t0) / 1_000_000.0
        game_logger.log_stats_update(action, elapsed_ms=round(ms, 3), **new.to_dict())
        return new


def _check_non_negative(**values: int) -> None:
    for name, v in values.items():
        if v < 0:
            raise ValueError(f"{name} must be >= 0, got {v}")
