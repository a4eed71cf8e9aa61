"""
Batch summary statistics (numpy).
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from nulldle.config import MAX_ATTEMPTS


def summarize(results: List[Dict], max_attempts: int = MAX_ATTEMPTS) -> Dict:
    """
    Aggregate run_batch output.

    Returns a JSON-friendly dict:
      games, wins, win_rate (percent), mean_guesses / median_guesses over wins,
      distribution: list where index i is the number of wins in i+1 guesses
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": 0.0,
                "median_guesses": 0.0, "distribution": [0] * max_attempts}

    success = np.array([bool(r["success"]) for r in results])
    guesses = np.array([int(r["guesses"]) for r in results])
    won = guesses[success]

    # bincount over 1..max_attempts; drop the unused 0 bucket
    dist = np.bincount(won, minlength=max_attempts + 1)[1:max_attempts + 1]

    return {
        "games": int(success.size),
        "wins": int(success.sum()),
        "win_rate": float(success.mean() * 100.0),
        "mean_guesses": float(won.mean()) if won.size else 0.0,
        "median_guesses": float(np.median(won)) if won.size else 0.0,
        "distribution": dist.astype(int).tolist(),
    }
