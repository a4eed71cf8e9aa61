"""
Glue between a finished game and the statistics store.

The session reports `finished=True` on exactly one GuessResult per game;
StatsRecorder turns that into exactly one record_win or record_loss call.
The payload comes from the result alone, so recording after the session
has been reset still counts the game that ended.
"""

from __future__ import annotations

from typing import Optional

from nulldle.session import GameStatus, GuessResult
from .record import StatsRecord
from .store import StatsStore


class StatsRecorder:
    def __init__(self, store: StatsStore):
        self.store = store

    def record(self, result: GuessResult) -> Optional[StatsRecord]:
        """
        Record the game if `result` finished it.

        Returns the updated record, or None when the game is still running.
        StorageUnavailable propagates; the game itself is unaffected.
        """
        if not result.finished:
            return None
        if result.status is GameStatus.WON:
            return self.store.record_win(**result.win_args())
        return self.store.record_loss(**result.loss_args())
