"""
Move sources for the computer's hand.
"""

import pytest

from ritual.engine.definitions import MOVES
from ritual.engine.errors import InvalidMove
from ritual.engine.opponent import RandomMoveSource, SequenceMoveSource


def test_sequence_plays_in_order_and_exhausts():
    source = SequenceMoveSource(["rock", "K"])
    assert source.next_move() == "rock"
    assert source.next_move() == "spock"
    assert source.consumed == 2
    with pytest.raises(IndexError):
        source.next_move()


def test_sequence_cycles():
    source = SequenceMoveSource(["paper", "lizard"], cycle=True)
    assert [source.next_move() for _ in range(5)] == ["paper", "lizard", "paper", "lizard", "paper"]


def test_sequence_validates_moves():
    with pytest.raises(InvalidMove):
        SequenceMoveSource(["rock", "fire"])
    with pytest.raises(ValueError):
        SequenceMoveSource([])


def test_random_source_covers_all_hands():
    source = RandomMoveSource(seed=7)
    drawn = {source.next_move() for _ in range(500)}
    assert drawn == set(MOVES)
