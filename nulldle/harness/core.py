"""
Autoplay harness.

- RandomConsistentPlayer: guesses uniformly among dictionary words that are
  still consistent with every feedback seen so far.
- run_case:  play one game through a real Session (optionally recording stats).
- run_batch: play many games back to back.

Games go through Session.submit_guess exactly like a human's, so the same
validation, outcome and statistics paths are exercised.
"""

from __future__ import annotations

import random
import time
from typing import Dict, List, Optional, Sequence

from nulldle.engine import filter_candidates, to_pattern
from nulldle.session import GameStatus, Session
from nulldle.stats import StatsRecorder


class RandomConsistentPlayer:
    id = "random_consistent"

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def reset(self, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, session: Session, pool: Sequence[str]) -> str:
        """
        Pick any consistent word (seeded RNG).

        `pool` is the dictionary; already-played words are excluded since the
        session would reject them as duplicates.
        """
        history = session.history()
        played = {g for g, _ in history}
        candidates = [w for w in filter_candidates(pool, history, session.word_length)
                      if w not in played]
        # Fallback: any unplayed dictionary word
        if not candidates:
            candidates = [w for w in pool if w not in played and len(w) == session.word_length]
        return candidates[self.rng.randrange(len(candidates))]


def run_case(
        player: RandomConsistentPlayer,
        target: str,
        *,
        words: Sequence[str],
        recorder: Optional[StatsRecorder] = None,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until it is won or the attempts run out.

    Returns:
        dict with keys: success, guesses, time_ms, history [(guess, pattern)],
        answer, stats (the updated record as a dict, or None)
    """
    player.reset(seed=seed)
    session = Session(words, target=target)
    pool = list(words)

    stats = None
    t0 = time.perf_counter_ns()
    while not session.status.is_terminal:
        guess = player.next_guess(session, pool)
        result = session.submit_guess(guess)
        if recorder is not None:
            rec = recorder.record(result)
            if rec is not None:
                stats = rec.to_dict()
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    history = [(g, to_pattern(fb)) for g, fb in session.history()]
    return {
        "success": session.status is GameStatus.WON,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "answer": session.revealed_target,
        "stats": stats,
    }


def run_batch(
        player: RandomConsistentPlayer,
        targets: Sequence[str],
        *,
        words: Sequence[str],
        recorder: Optional[StatsRecorder] = None,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play every target in order (only the first `sample` if given).

    Each case's seed is base seed + index so runs are reproducible but cases
    differ.
    """
    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, target in enumerate(pool, start=1):
        case_seed = None if seed is None else seed + idx
        out.append(run_case(player, target, words=words, recorder=recorder, seed=case_seed))
    return out
