import os

import pytest
from nulldle import config as settings
from nulldle.config import BUNDLED_WORDS_PATH, MAX_ATTEMPTS, get_config


def test_fixed_rules():
    assert MAX_ATTEMPTS == 6


def test_testing_config_uses_memory_store():
    cfg = get_config("testing")
    assert cfg is settings.TestingConfig
    assert cfg.STATS_URL == "memory://"
    assert cfg.LOG_DIR is None
    assert os.path.exists(cfg.WORDS_PATH)


def test_env_selects_config(monkeypatch):
    monkeypatch.setenv("NULLDLE_ENV", "testing")
    assert get_config() is settings.TestingConfig


def test_unknown_config_name():
    with pytest.raises(ValueError):
        get_config("staging")


def test_bundled_words_path_points_into_package():
    assert BUNDLED_WORDS_PATH.endswith(os.path.join("datasets", "data", "words_5.txt"))
