"""
Action definitions for the ritual.
Actions are immutable instructions; the computer's hand is not part of them,
it is drawn from the move source when the action is applied.
"""

from dataclasses import dataclass, field

CONFIGURE = "configure"
SUBMIT_MOVE = "submit_move"
RESET = "reset"


@dataclass(frozen=True)
class Action:
    """Base action class. All actions have a type and payload."""
    type: str  # "configure", "submit_move" or "reset"
    payload: dict = field(default_factory=dict)


def configure(name: str, round_limit: int) -> Action:
    """
    Start a ritual for a player.
    Example: configure("Ava", 5)
    """
    return Action(
        type=CONFIGURE,
        payload={"name": name, "round_limit": round_limit},
    )


def submit_move(move: str) -> Action:
    """Play one hand. Example: submit_move("spock")"""
    return Action(
        type=SUBMIT_MOVE,
        payload={"move": move},
    )


def reset(preserve_identity: bool = True) -> Action:
    """
    Start over.
    preserve_identity=True keeps the player name and round limit ("new ritual, same player");
    False clears them and returns to the setup step.
    """
    return Action(
        type=RESET,
        payload={"preserve_identity": preserve_identity},
    )
