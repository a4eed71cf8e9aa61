"""
Statistics snapshot.

All stored values are totals; rates and averages are computed on demand.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Dict, Mapping

# Storage keys, also the field names
FIELDS = (
    "games_played",
    "games_won",
    "current_streak",
    "max_streak",
    "total_guesses_on_wins",
    "total_incorrect_attempts",
)


@dataclass(frozen=True)
class StatsRecord:
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    # Sum of guesses used in all wins (for the average)
    total_guesses_on_wins: int = 0
    # Sum of incorrect attempts across finished games
    total_incorrect_attempts: int = 0

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "StatsRecord":
        """Build from stored key/values; missing keys default to 0."""
        return cls(**{f.name: int(values.get(f.name, 0) or 0) for f in fields(cls)})

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def with_win(self, guesses_used: int, incorrect_attempts: int) -> "StatsRecord":
        streak = self.current_streak + 1
        return replace(
            self,
            games_played=self.games_played + 1,
            games_won=self.games_won + 1,
            current_streak=streak,
            max_streak=max(self.max_streak, streak),
            total_guesses_on_wins=self.total_guesses_on_wins + guesses_used,
            total_incorrect_attempts=self.total_incorrect_attempts + incorrect_attempts,
        )

    def with_loss(self, incorrect_attempts: int) -> "StatsRecord":
        # games_won and max_streak are untouched by a loss
        return replace(
            self,
            games_played=self.games_played + 1,
            current_streak=0,
            total_incorrect_attempts=self.total_incorrect_attempts + incorrect_attempts,
        )

    # ---- derived metrics ----

    @property
    def games_lost(self) -> int:
        return self.games_played - self.games_won

    @property
    def win_rate(self) -> float:
        """Win rate in percent; 0 if no games played."""
        return self.games_won / self.games_played * 100.0 if self.games_played else 0.0

    @property
    def avg_guesses_per_win(self) -> float:
        return self.total_guesses_on_wins / self.games_won if self.games_won else 0.0

    @property
    def avg_incorrect_per_game(self) -> float:
        return self.total_incorrect_attempts / self.games_played if self.games_played else 0.0
