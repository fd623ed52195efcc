"""
Static definitions for the five hands.
The beats table is fixed; it is validated once at import so a bad edit fails loudly.
"""

from ritual.engine import MOVE_COUNT, BEATEN_PER_MOVE
from ritual.engine.errors import InvalidMove

ROCK = "rock"
PAPER = "paper"
SCISSORS = "scissors"
LIZARD = "lizard"
SPOCK = "spock"

# Order matches the hand buttons in the UI.
MOVES: tuple[str, ...] = (ROCK, PAPER, SCISSORS, LIZARD, SPOCK)

# move -> moves it defeats
BEATS: dict[str, frozenset[str]] = {
    ROCK: frozenset({SCISSORS, LIZARD}),
    PAPER: frozenset({ROCK, SPOCK}),
    SCISSORS: frozenset({PAPER, LIZARD}),
    LIZARD: frozenset({PAPER, SPOCK}),
    SPOCK: frozenset({ROCK, SCISSORS}),
}

# Single-letter shortcuts for terminal input ("k" for spock, "s" is taken).
MOVE_SHORTCUTS: dict[str, str] = {
    "r": ROCK,
    "p": PAPER,
    "s": SCISSORS,
    "l": LIZARD,
    "k": SPOCK,
}


def validate_beats_table(table: dict[str, frozenset[str]]) -> None:
    """
    Check that a beats table is a total, antisymmetric relation over the moves.

    Raises:
        ValueError: describing the first violation found
    """
    if len(table) != MOVE_COUNT:
        raise ValueError(f"Beats table must have {MOVE_COUNT} entries, got {len(table)}")
    moves = set(table)
    for move, beaten in table.items():
        if len(beaten) != BEATEN_PER_MOVE:
            raise ValueError(f"{move} must beat exactly {BEATEN_PER_MOVE} moves, beats {sorted(beaten)}")
        if move in beaten:
            raise ValueError(f"{move} cannot beat itself")
        unknown = set(beaten) - moves
        if unknown:
            raise ValueError(f"{move} beats unknown moves: {sorted(unknown)}")
    for a in table:
        for b in table:
            if a == b:
                continue
            a_wins = b in table[a]
            b_wins = a in table[b]
            if a_wins and b_wins:
                raise ValueError(f"{a} and {b} both beat each other")
            if not a_wins and not b_wins:
                raise ValueError(f"No winner defined between {a} and {b}")


def beats(move: str, other: str) -> bool:
    """True if move defeats other."""
    return other in BEATS[move]


def is_valid_move(value: object) -> bool:
    return isinstance(value, str) and value in BEATS


def parse_move(value: str) -> str:
    """
    Normalize raw input into a move.
    Accepts full names in any case and the single-letter shortcuts.
    """
    if not isinstance(value, str):
        raise InvalidMove(value)
    key = value.strip().lower()
    if key in BEATS:
        return key
    if key in MOVE_SHORTCUTS:
        return MOVE_SHORTCUTS[key]
    raise InvalidMove(value)


validate_beats_table(BEATS)
