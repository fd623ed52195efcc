"""
Ritual events for UI hooks and logging.
Events describe what happened during action processing.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class RitualEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}


# ===== Event Type Constants =====

RITUAL_CONFIGURED = "ritual_configured"
ROUND_RESOLVED = "round_resolved"
RITUAL_COMPLETED = "ritual_completed"
RITUAL_RESET = "ritual_reset"
PHASE_CHANGED = "phase_changed"


# ===== Event Factory Functions =====

def ritual_configured(player_name: str, max_rounds: int) -> RitualEvent:
    return RitualEvent(RITUAL_CONFIGURED, {
        "player_name": player_name,
        "max_rounds": max_rounds,
    })


def round_resolved(
    round_number: int,
    player_move: str,
    computer_move: str,
    outcome: str,
    player_score: int,
    computer_score: int,
) -> RitualEvent:
    return RitualEvent(ROUND_RESOLVED, {
        "round_number": round_number,
        "player_move": player_move,
        "computer_move": computer_move,
        "outcome": outcome,
        "player_score": player_score,
        "computer_score": computer_score,
    })


def ritual_completed(player_score: int, computer_score: int, verdict: str) -> RitualEvent:
    """Emitted once, on the round that reaches the limit."""
    return RitualEvent(RITUAL_COMPLETED, {
        "player_score": player_score,
        "computer_score": computer_score,
        "verdict": verdict,  # "victory" | "defeat" | "balance"
    })


def ritual_reset(preserve_identity: bool, player_name: str | None) -> RitualEvent:
    return RitualEvent(RITUAL_RESET, {
        "preserve_identity": preserve_identity,
        "player_name": player_name,
    })


def phase_changed(old_phase: str, new_phase: str) -> RitualEvent:
    return RitualEvent(PHASE_CHANGED, {
        "old_phase": old_phase,
        "new_phase": new_phase,
    })
