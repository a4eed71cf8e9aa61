# apps/cli/play.py
"""
Terminal front end for nulldle.

This script:
  1) Loads the word source (bundled list, env config or --words/--answers).
  2) Runs games: reads guesses from stdin, prints the feedback row and the
     keyboard, reports rejected words without using an attempt.
  3) Records each finished game in the statistics store; a storage failure
     is reported and play continues.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --stats
    python -m apps.cli.play --reset-stats [--yes]
"""

from __future__ import annotations

import argparse
import sys

from nulldle.config import MAX_ATTEMPTS, get_config
from nulldle.datasets import WordSource
from nulldle.engine import GameError, KeyboardState, LetterScore, to_pattern
from nulldle.session import GameStatus, Session
from nulldle.stats import StatsRecord, StatsRecorder, StatsStore, StorageUnavailable
from nulldle.utils import game_logger

_KEY_MARK = {None: " ", LetterScore.ABSENT: "-", LetterScore.PRESENT: "?", LetterScore.CORRECT: "!"}


def format_row(guess: str, pattern: str) -> str:
    """e.g. 'C R A N E   G Y - - G'"""
    return f"{' '.join(guess.upper())}   {' '.join(pattern)}"


def format_keyboard(keyboard: KeyboardState) -> str:
    """Three QWERTY rows; each key followed by its best-seen mark."""
    lines = []
    for indent, row in enumerate(keyboard.rows()):
        keys = " ".join(f"{c.upper()}{_KEY_MARK[s]}" for c, s in row)
        lines.append(" " * indent + keys)
    return "\n".join(lines)


def format_stats(rec: StatsRecord) -> str:
    return "\n".join([
        "Statistics",
        f"  Played:              {rec.games_played}",
        f"  Won / Lost:          {rec.games_won} / {rec.games_lost}",
        f"  Win %:               {rec.win_rate:.1f}",
        f"  Current streak:      {rec.current_streak}",
        f"  Max streak:          {rec.max_streak}",
        f"  Avg guesses per win: {rec.avg_guesses_per_win:.2f}",
        f"  Avg incorrect/game:  {rec.avg_incorrect_per_game:.2f}",
    ])


def play_game(session: Session, recorder: StatsRecorder, *, inp=input, out=print) -> GameStatus:
    """Run one game to completion. Returns the final status (or IN_PROGRESS on EOF)."""
    out(f"Guess the {session.word_length}-letter word. You have {MAX_ATTEMPTS} tries.")
    while not session.status.is_terminal:
        try:
            raw = inp(f"[{session.max_attempts - session.attempts_left + 1}/{MAX_ATTEMPTS}] > ")
        except EOFError:
            out("")
            return session.status

        try:
            result = session.submit_guess(raw)
        except GameError as e:
            out(e.message)
            continue

        out(format_row(result.guess, to_pattern(result.feedback)))
        out(format_keyboard(session.keyboard()))

        if result.finished:
            if result.status is GameStatus.WON:
                out(f"You win! Solved in {result.attempt}.")
            else:
                out(f"Out of guesses! Word was {session.revealed_target.upper()}")
            try:
                recorder.record(result)
            except StorageUnavailable as e:
                out(f"Warning: {e.message} ({e})")
    return session.status


def confirm_reset(store: StatsStore, *, assume_yes: bool = False, inp=input, out=print) -> bool:
    """Ask before clearing statistics. Returns True if they were cleared."""
    if not assume_yes:
        try:
            answer = inp("Reset all statistics? This cannot be undone. [y/N] ").strip().lower()
        except EOFError:
            answer = ""
        if answer not in ("y", "yes"):
            out("Statistics kept.")
            return False
    store.reset_all()
    out("Statistics cleared.")
    return True


def main():
    cfg = get_config()

    ap = argparse.ArgumentParser(description="nulldle: guess the hidden word in six tries")
    ap.add_argument("--words", default=cfg.WORDS_PATH, help="dictionary of allowed guesses")
    ap.add_argument("--answers", default=cfg.ANSWERS_PATH,
                    help="optional answer pool (defaults to the dictionary)")
    ap.add_argument("--stats-url", default=cfg.STATS_URL,
                    help="memory://, sqlite:///file.db or a JSON file path")
    ap.add_argument("--target", help="play a fixed target (testing)")
    ap.add_argument("--seed", type=int, help="RNG seed for target selection")
    ap.add_argument("--stats", action="store_true", help="print statistics and exit")
    ap.add_argument("--reset-stats", action="store_true", help="clear statistics and exit")
    ap.add_argument("--yes", action="store_true", help="skip the --reset-stats confirmation")
    ap.add_argument("--log-dir", default=cfg.LOG_DIR, help="write JSON game logs here")
    args = ap.parse_args()

    game_logger.configure(cfg.LOG_LEVEL, args.log_dir)

    try:
        store = StatsStore.from_url(args.stats_url)
        if args.reset_stats:
            confirm_reset(store, assume_yes=args.yes)
            return 0
        if args.stats:
            print(format_stats(store.load()))
            return 0
    except StorageUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    words = WordSource.from_files(args.words, args.answers, N=cfg.WORD_LENGTH,
                                  seed=args.seed, forced_target=args.target)
    session = Session(words, target=words.pick_target())
    recorder = StatsRecorder(store)

    while True:
        status = play_game(session, recorder)
        if not status.is_terminal:
            break
        try:
            again = input("Play again? [y/N] ").strip().lower()
        except EOFError:
            break
        if again not in ("y", "yes"):
            break
        session.reset(words.pick_target())

    try:
        print(format_stats(store.load()))
    except StorageUnavailable as e:
        print(f"Warning: {e.message} ({e})", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
