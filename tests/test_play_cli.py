from apps.cli.play import confirm_reset, format_keyboard, format_row, format_stats, play_game
from nulldle.engine import KeyboardState, evaluate
from nulldle.session import GameStatus, Session
from nulldle.stats import MemoryBackend, StatsRecord, StatsRecorder, StatsStore, StorageUnavailable


def _scripted(lines):
    it = iter(lines)

    def _input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_play_game_reports_rejections_and_records_win():
    out = []
    store = StatsStore(MemoryBackend())
    s = Session(["about", "cigar"], target="about")
    status = play_game(s, StatsRecorder(store), inp=_scripted(["xxxxx", "cigar", "cigar", "about"]),
                       out=out.append)
    assert status is GameStatus.WON
    assert "Not a valid word!" in out
    assert "You already tried that word!" in out
    assert any(line.startswith("You win!") for line in out)
    assert store.load().games_won == 1


def test_play_game_loss_reveals_word():
    words = ["about", "zesty", "cigar", "proud", "couch", "teary", "fuzzy"]
    out = []
    store = StatsStore(MemoryBackend())
    status = play_game(Session(words, target="about"), StatsRecorder(store),
                       inp=_scripted(words[1:]), out=out.append)
    assert status is GameStatus.LOST
    assert "Out of guesses! Word was ABOUT" in out
    assert store.load().current_streak == 0


def test_play_game_survives_storage_failure():
    class Broken(MemoryBackend):
        def write(self, values):
            raise StorageUnavailable("read-only")

    out = []
    status = play_game(Session(["about"], target="about"), StatsRecorder(StatsStore(Broken())),
                       inp=_scripted(["about"]), out=out.append)
    assert status is GameStatus.WON
    assert any(line.startswith("Warning: Statistics could not be saved") for line in out)


def test_play_game_stops_on_eof():
    s = Session(["about", "cigar"], target="about")
    status = play_game(s, StatsRecorder(StatsStore()), inp=_scripted([]), out=lambda *_: None)
    assert status is GameStatus.IN_PROGRESS


def test_formatters():
    assert format_row("crane", "G-Y--") == "C R A N E   G - Y - -"
    kb = KeyboardState().apply_guess("crane", evaluate("about", "crane"))
    first = format_keyboard(kb).splitlines()[1]
    assert first.startswith(" A?")
    text = format_stats(StatsRecord(games_played=2, games_won=1, current_streak=0, max_streak=1))
    assert "Win %:               50.0" in text


def test_reset_stats_asks_before_clearing():
    store = StatsStore(MemoryBackend())
    store.record_win(2, 1)
    out = []
    assert confirm_reset(store, inp=_scripted(["n"]), out=out.append) is False
    assert store.load().games_played == 1
    assert out == ["Statistics kept."]

    assert confirm_reset(store, inp=_scripted([]), out=out.append) is False
    assert store.load().games_played == 1

    assert confirm_reset(store, inp=_scripted(["y"]), out=out.append) is True
    assert store.load() == StatsRecord()


def test_reset_stats_yes_skips_prompt():
    store = StatsStore(MemoryBackend())
    store.record_loss(6)

    def _no_input(prompt=""):
        raise AssertionError("prompted despite --yes")

    assert confirm_reset(store, assume_yes=True, inp=_no_input, out=lambda *_: None) is True
    assert store.load().games_played == 0
