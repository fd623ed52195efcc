"""
Round resolution.
A total, deterministic function of the two hands and the beats table.
"""

from ritual.engine.definitions import BEATS

WIN = "win"
LOSE = "lose"
DRAW = "draw"


def resolve_outcome(player_move: str, computer_move: str) -> str:
    """Outcome of a round from the player's point of view."""
    if player_move == computer_move:
        return DRAW
    if computer_move in BEATS[player_move]:
        return WIN
    return LOSE


def score_delta(outcome: str) -> tuple[int, int]:
    """(player, computer) points awarded for an outcome."""
    if outcome == WIN:
        return 1, 0
    if outcome == LOSE:
        return 0, 1
    return 0, 0


VICTORY = "victory"
DEFEAT = "defeat"
BALANCE = "balance"


def final_verdict(player_score: int, computer_score: int) -> str:
    """Framing of a finished ritual."""
    if player_score > computer_score:
        return VICTORY
    if player_score < computer_score:
        return DEFEAT
    return BALANCE
