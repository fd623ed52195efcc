"""
Round-count selection at the setup step.
"""

import pytest

from ritual.config import DEFAULT_MAX_ROUNDS, ROUND_OPTIONS, _env_int, get_round_limit
from ritual.engine.errors import InvalidConfiguration


def test_option_keys():
    for key, rounds in ROUND_OPTIONS.items():
        assert get_round_limit(key) == rounds
    assert get_round_limit(" Quick ") == ROUND_OPTIONS["quick"]


def test_numbers_and_default():
    assert get_round_limit(7) == 7
    assert get_round_limit("12") == 12
    assert get_round_limit(None) == DEFAULT_MAX_ROUNDS


@pytest.mark.parametrize("bad", ["forever", "0", -1, 0, True, ""])
def test_invalid_selection(bad):
    with pytest.raises(InvalidConfiguration):
        get_round_limit(bad)


@pytest.mark.parametrize("raw", ["0", "-3", "many", ""])
def test_env_round_default_falls_back_when_not_positive(monkeypatch, raw):
    monkeypatch.setenv("RITUAL_TEST_ROUNDS", raw)
    assert _env_int("RITUAL_TEST_ROUNDS", 10, positive=True) == 10


def test_env_int_reads_values(monkeypatch):
    monkeypatch.setenv("RITUAL_TEST_ROUNDS", "7")
    assert _env_int("RITUAL_TEST_ROUNDS", 10, positive=True) == 7
    # Seeds may be zero
    monkeypatch.setenv("RITUAL_TEST_SEED", "0")
    assert _env_int("RITUAL_TEST_SEED", None) == 0
