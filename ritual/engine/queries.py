"""
Query functions for UI integration.
These functions help the UI decide what to show and enable
without mutating ritual state.
"""

from dataclasses import dataclass
from typing import Any
from ritual.engine.state import RitualState, IN_PROGRESS
from ritual.engine.actions import Action, CONFIGURE, SUBMIT_MOVE, RESET
from ritual.engine.definitions import MOVES, is_valid_move
from ritual.engine.errors import InvalidConfiguration
from ritual.engine.reducer import PHASE_ALLOWED_ACTIONS, check_configuration
from ritual.engine.resolution import final_verdict


@dataclass
class ValidationResult:
    """Result of action validation."""
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "error": self.error}


def validate_action(state: RitualState, action: Action) -> ValidationResult:
    """
    Validate an action without applying it.
    Never draws from a move source.
    """
    if action.type not in (CONFIGURE, SUBMIT_MOVE, RESET):
        return ValidationResult(False, f"Unknown action type: {action.type}")

    allowed = PHASE_ALLOWED_ACTIONS.get(state.phase, [])
    if action.type not in allowed:
        return ValidationResult(
            False,
            f"Action '{action.type}' is not allowed in phase '{state.phase}'",
        )

    if action.type == CONFIGURE:
        try:
            check_configuration(action.payload.get("name"), action.payload.get("round_limit"))
        except InvalidConfiguration as e:
            return ValidationResult(False, str(e))

    if action.type == SUBMIT_MOVE:
        move = action.payload.get("move")
        if not is_valid_move(move):
            return ValidationResult(False, f"Unknown move {move!r}")

    return ValidationResult(True)


def get_available_moves(state: RitualState) -> list[str]:
    """Hands the player may pick right now; empty disables the buttons."""
    if state.phase != IN_PROGRESS:
        return []
    return list(MOVES)


def get_final_verdict(state: RitualState) -> str | None:
    """'victory', 'defeat' or 'balance' once the ritual is complete, else None."""
    if not state.is_complete():
        return None
    return final_verdict(state.player_score, state.computer_score)


def get_ritual_summary(state: RitualState) -> dict[str, Any]:
    """Compact overview for a status panel."""
    return {
        "player_name": state.player_name,
        "player_score": state.player_score,
        "computer_score": state.computer_score,
        "current_round": state.current_round,
        "max_rounds": state.max_rounds,
        "rounds_remaining": state.rounds_remaining,
        "phase": state.phase,
        "verdict": get_final_verdict(state),
    }
