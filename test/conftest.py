"""Shared fixtures: scripted engines and an API client with a clean session map."""

import time

import pytest
from fastapi.testclient import TestClient

from ritual.api import main as api_main
from ritual.engine.engine import RitualEngine
from ritual.engine.opponent import SequenceMoveSource


@pytest.fixture
def scripted_engine():
    """Factory: engine whose opponent plays the given hands in order."""
    def _make(*moves, cycle=False):
        return RitualEngine(SequenceMoveSource(moves, cycle=cycle))
    return _make


@pytest.fixture
def client(monkeypatch):
    """
    API client whose opponents always play scissors, rock, paper (repeating),
    so round outcomes are predictable.
    """
    api_main.rituals.clear()
    monkeypatch.setattr(
        api_main,
        "new_engine",
        lambda: RitualEngine(SequenceMoveSource(["scissors", "rock", "paper"], cycle=True)),
    )
    with TestClient(api_main.app) as c:
        yield c
    api_main.rituals.clear()


class SlowMoveSource:
    """Always plays scissors, after a pause, so overlapping calls actually overlap."""

    def __init__(self, delay=0.1):
        self.delay = delay
        self.drawn = 0

    def next_move(self):
        time.sleep(self.delay)
        self.drawn += 1
        return "scissors"


@pytest.fixture
def slow_source():
    return SlowMoveSource()
