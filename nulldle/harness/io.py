"""
I/O utilities for autoplay runs.

- write_csv:      one row per game with fixed guess/pattern columns
- write_manifest: JSON dump of the run configuration and summary
- timestamp_id:   compact UTC run id for filenames
- git_commit_or_unknown: short commit hash when available

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text instead of parsing them as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

from nulldle.config import MAX_ATTEMPTS


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, *, player_id: str = "?",
              max_attempts: int = MAX_ATTEMPTS) -> str:
    """
    Columns: player, answer, success, guesses, time_ms,
             guess_1, patt_1, ..., guess_6, patt_6
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["player", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_attempts + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "player": player_id,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_attempts + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
