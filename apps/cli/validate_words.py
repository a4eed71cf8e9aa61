"""
Check a dictionary (and optional answer pool) before shipping it.

Usage:
    python -m apps.cli.validate_words --words nulldle/datasets/data/words_5.txt
"""

import argparse
import json
import sys

from nulldle.config import get_config
from nulldle.datasets import pretty_summary, validate_wordlists


def main():
    cfg = get_config()
    ap = argparse.ArgumentParser(description="Validate nulldle word lists.")
    ap.add_argument("--words", default=cfg.WORDS_PATH)
    ap.add_argument("--answers", default=cfg.ANSWERS_PATH)
    ap.add_argument("--N", type=int, default=cfg.WORD_LENGTH, help="word length")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args()

    rep = validate_wordlists(args.N, args.words, args.answers)
    print(json.dumps(rep, indent=2) if args.json else pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
