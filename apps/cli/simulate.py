# apps/cli/simulate.py
"""
Autoplay a batch of games through real sessions.

This script:
  1) Validates the word lists and prints the one-line summary.
  2) Plays every target (or a seeded sample) with the random-consistent
     player, optionally recording each game into a statistics store.
  3) Writes a CSV (one row per game) and a JSON manifest, and prints a
     numpy summary (win rate, mean guesses, distribution).
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from tqdm import tqdm

from nulldle.config import MAX_ATTEMPTS, get_config
from nulldle.datasets import WordSource, pretty_summary, validate_wordlists
from nulldle.harness import RandomConsistentPlayer, run_case, summarize, write_csv, write_manifest
from nulldle.harness.io import git_commit_or_unknown, timestamp_id
from nulldle.stats import StatsRecorder, StatsStore
from nulldle.utils import game_logger


def main():
    cfg = get_config()

    ap = argparse.ArgumentParser(description="nulldle: autoplay games for testing and tuning")
    ap.add_argument("--words", default=cfg.WORDS_PATH, help="dictionary of allowed guesses")
    ap.add_argument("--answers", default=cfg.ANSWERS_PATH, help="optional answer pool")
    ap.add_argument("--sample", type=int, help="play only K targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--stats-url", help="also record every game into this stats store")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("--log-dir", default=cfg.LOG_DIR)
    args = ap.parse_args()

    game_logger.configure("WARNING", args.log_dir)

    rep = validate_wordlists(cfg.WORD_LENGTH, args.words, args.answers)
    print(pretty_summary(rep))

    words = WordSource.from_files(args.words, args.answers, N=cfg.WORD_LENGTH)

    rng = random.Random(args.seed)
    targets = list(words.answers)
    if args.sample and args.sample < len(targets):
        rng.shuffle(targets)
        targets = targets[: args.sample]

    recorder = StatsRecorder(StatsStore.from_url(args.stats_url)) if args.stats_url else None
    player = RandomConsistentPlayer()

    iterator = tqdm(targets, ncols=80, desc="Playing", unit="game",
                    disable=(args.progress == "off"), file=sys.stderr)
    results = []
    for idx, target in enumerate(iterator, 1):
        results.append(run_case(player, target, words=words, recorder=recorder,
                                seed=args.seed + idx))

    summary = summarize(results)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"sim_{run_id}.csv"), player_id=player.id,
                         max_attempts=MAX_ATTEMPTS)
    manifest_path = write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "player_id": player.id,
        "summary": summary,
    }, str(outdir / f"sim_{run_id}_manifest.json"))

    print(f"games={summary['games']} win_rate={summary['win_rate']:.1f}% "
          f"mean_guesses={summary['mean_guesses']:.2f} dist={summary['distribution']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
