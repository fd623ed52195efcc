"""
Ritual state representation.
The reducer never mutates a state it is given; it works on copies.
Includes dict serialization for the API layer.
"""

from dataclasses import dataclass
from copy import deepcopy
from typing import Any

UNCONFIGURED = "unconfigured"
IN_PROGRESS = "in_progress"
COMPLETE = "complete"

PHASES = (UNCONFIGURED, IN_PROGRESS, COMPLETE)


def _int(v: Any, default: int) -> int:
    try:
        return int(v) if v is not None else default
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one resolved round, as handed to the presentation layer."""
    player_move: str
    computer_move: str
    outcome: str  # "win" | "lose" | "draw", relative to the player
    player_score: int  # Scores after this round
    computer_score: int
    current_round: int  # Round number just played (1-based)
    ritual_complete: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_move": self.player_move,
            "computer_move": self.computer_move,
            "outcome": self.outcome,
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "current_round": self.current_round,
            "ritual_complete": self.ritual_complete,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoundResult":
        return cls(
            player_move=str(data["player_move"]),
            computer_move=str(data["computer_move"]),
            outcome=str(data["outcome"]),
            player_score=_int(data.get("player_score"), 0),
            computer_score=_int(data.get("computer_score"), 0),
            current_round=_int(data.get("current_round"), 0),
            ritual_complete=bool(data.get("ritual_complete", False)),
        )


@dataclass
class RitualState:
    """
    One ritual session.

    player_name and max_rounds are None until the ritual is configured.
    Invariant: player_score + computer_score <= current_round <= max_rounds.
    """
    player_name: str | None = None
    max_rounds: int | None = None
    current_round: int = 0
    player_score: int = 0
    computer_score: int = 0
    phase: str = UNCONFIGURED
    last_round: RoundResult | None = None

    def copy(self) -> "RitualState":
        """Return a deep copy of this ritual state."""
        return deepcopy(self)

    def is_complete(self) -> bool:
        return self.phase == COMPLETE

    def is_configured(self) -> bool:
        return self.player_name is not None and self.max_rounds is not None

    @property
    def rounds_remaining(self) -> int:
        if self.max_rounds is None:
            return 0
        return self.max_rounds - self.current_round

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_name": self.player_name,
            "max_rounds": self.max_rounds,
            "current_round": self.current_round,
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "phase": self.phase,
            "last_round": self.last_round.to_dict() if self.last_round else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RitualState":
        if not isinstance(data, dict):
            data = {}
        phase = data.get("phase")
        if phase not in PHASES:
            phase = UNCONFIGURED
        max_rounds = data.get("max_rounds")
        last_round = data.get("last_round")
        return cls(
            player_name=data.get("player_name"),
            max_rounds=_int(max_rounds, 0) if max_rounds is not None else None,
            current_round=_int(data.get("current_round"), 0),
            player_score=_int(data.get("player_score"), 0),
            computer_score=_int(data.get("computer_score"), 0),
            phase=phase,
            last_round=RoundResult.from_dict(last_round) if isinstance(last_round, dict) else None,
        )
