import csv
from pathlib import Path

from nulldle.harness import RandomConsistentPlayer, run_batch, run_case, summarize, write_csv
from nulldle.stats import MemoryBackend, StatsRecorder, StatsStore


def test_run_case_smoke():
    words = ["crane", "raise", "stare", "trace", "cared"]
    r = run_case(RandomConsistentPlayer(), "crane", words=words, seed=42)
    assert "success" in r and "history" in r
    # Every guess stays consistent, so a 5-word pool is solved within 6
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["answer"] == "crane"


def test_run_batch_records_stats():
    words = ["crane", "raise", "stare", "trace", "cared", "about", "zesty"]
    store = StatsStore(MemoryBackend())
    results = run_batch(RandomConsistentPlayer(), ["crane", "about", "zesty"], words=words,
                        recorder=StatsRecorder(store), seed=7)
    assert len(results) == 3
    rec = store.load()
    assert rec.games_played == 3
    assert rec.games_won == sum(r["success"] for r in results)
    assert results[-1]["stats"]["games_played"] == 3


def test_summarize_distribution():
    results = [
        {"success": True, "guesses": 3},
        {"success": True, "guesses": 3},
        {"success": True, "guesses": 5},
        {"success": False, "guesses": 6},
    ]
    s = summarize(results)
    assert s["games"] == 4 and s["wins"] == 3
    assert s["win_rate"] == 75.0
    assert s["distribution"] == [0, 0, 2, 0, 1, 0]
    assert abs(s["mean_guesses"] - 11 / 3) < 1e-9
    assert s["median_guesses"] == 3.0


def test_summarize_empty():
    assert summarize([])["distribution"] == [0] * 6


def test_write_csv(tmp_path: Path):
    r = run_case(RandomConsistentPlayer(), "stare", words=["crane", "stare"], seed=1)
    path = write_csv([r], str(tmp_path / "out" / "run.csv"), player_id="random_consistent")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "stare"
    assert rows[0]["player"] == "random_consistent"
    assert rows[0]["patt_6"] == ""
