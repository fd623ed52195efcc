"""
Sources for the computer's hand.
The engine depends only on next_move(); tests and demos swap in a fixed sequence.
"""

import random
from typing import Iterable, Protocol

from ritual.engine.definitions import MOVES, parse_move


class MoveSource(Protocol):
    def next_move(self) -> str:
        ...


class RandomMoveSource:
    """
    Uniform draw over the five hands, independent each round.

    Args:
        seed: Optional random seed for reproducibility. Uses a private
              random.Random so seeding one session never affects another.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def next_move(self) -> str:
        return self._rng.choice(MOVES)


class SequenceMoveSource:
    """
    Plays a scripted list of hands in order.
    With cycle=True the list repeats; otherwise running out raises IndexError.
    """

    def __init__(self, moves: Iterable[str], cycle: bool = False):
        self._moves = [parse_move(m) for m in moves]
        if not self._moves:
            raise ValueError("SequenceMoveSource needs at least one move")
        self._cycle = cycle
        self._index = 0

    @property
    def consumed(self) -> int:
        """How many moves have been drawn so far."""
        return self._index

    def next_move(self) -> str:
        if self._index >= len(self._moves) and not self._cycle:
            raise IndexError(f"Move sequence exhausted after {len(self._moves)} moves")
        move = self._moves[self._index % len(self._moves)]
        self._index += 1
        return move
