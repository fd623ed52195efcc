"""
Main ritual reducer.
Applies actions to state, enforcing rules and producing new state.
Returns (new_state, events) where events describe what happened.
"""

from ritual.engine.state import RitualState, RoundResult, UNCONFIGURED, IN_PROGRESS, COMPLETE
from ritual.engine.actions import Action, CONFIGURE, SUBMIT_MOVE, RESET
from ritual.engine.definitions import is_valid_move
from ritual.engine.errors import InvalidConfiguration, InvalidMove, RitualNotInProgress
from ritual.engine.opponent import MoveSource
from ritual.engine.resolution import resolve_outcome, score_delta, final_verdict
from ritual.engine.events import (
    RitualEvent,
    ritual_configured,
    round_resolved,
    ritual_completed,
    ritual_reset,
    phase_changed,
)
from ritual.logging_config import get_logger

logger = get_logger(__name__)


# Phase rules: which action types are allowed in which phases
PHASE_ALLOWED_ACTIONS = {
    UNCONFIGURED: [CONFIGURE, RESET],
    IN_PROGRESS: [CONFIGURE, SUBMIT_MOVE, RESET],
    COMPLETE: [CONFIGURE, RESET],
}


def _validate_action_for_phase(action: Action, state: RitualState) -> None:
    """Raise if the action is not allowed in the current phase."""
    allowed_actions = PHASE_ALLOWED_ACTIONS.get(state.phase, [])
    if action.type in allowed_actions:
        return
    if action.type == SUBMIT_MOVE:
        raise RitualNotInProgress(state.phase)
    raise ValueError(
        f"Action '{action.type}' is not allowed in phase '{state.phase}'. "
        f"Allowed actions: {', '.join(allowed_actions)}"
    )


def check_configuration(name: object, round_limit: object) -> tuple[str, int]:
    """
    Validate configure inputs.

    Returns:
        (trimmed name, round limit)

    Raises:
        InvalidConfiguration: blank name, or limit that is not a positive int
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidConfiguration("Player name must not be empty")
    # bool is an int subclass; True is not a round count
    if isinstance(round_limit, bool) or not isinstance(round_limit, int):
        raise InvalidConfiguration(f"Round limit must be an integer, got {round_limit!r}")
    if round_limit <= 0:
        raise InvalidConfiguration(f"Round limit must be positive, got {round_limit}")
    return name.strip(), round_limit


def apply_action(
    state: RitualState,
    action: Action,
    move_source: MoveSource | None = None,
) -> tuple[RitualState, list[RitualEvent]]:
    """
    Apply a single action to the current state, returning new state and events.

    The input state is never modified; on any error nothing has changed.

    Args:
        state: Current ritual state
        action: Action to apply
        move_source: Supplies the computer's hand; required for submit_move

    Returns:
        Tuple of (new_state, events) where events describe what happened
    """
    if action.type not in (CONFIGURE, SUBMIT_MOVE, RESET):
        raise ValueError(f"Unknown action type: {action.type}")

    _validate_action_for_phase(action, state)

    new_state = state.copy()
    events: list[RitualEvent] = []

    if action.type == CONFIGURE:
        new_state, evts = _handle_configure(new_state, action)
    elif action.type == SUBMIT_MOVE:
        if move_source is None:
            raise ValueError("submit_move requires a move source")
        new_state, evts = _handle_submit_move(new_state, action, move_source)
    else:
        new_state, evts = _handle_reset(new_state, action)
    events.extend(evts)

    if new_state.phase != state.phase:
        events.append(phase_changed(state.phase, new_state.phase))

    return new_state, events


def _handle_configure(state: RitualState, action: Action) -> tuple[RitualState, list[RitualEvent]]:
    name, round_limit = check_configuration(
        action.payload.get("name"), action.payload.get("round_limit"))

    state.player_name = name
    state.max_rounds = round_limit
    state.current_round = 0
    state.player_score = 0
    state.computer_score = 0
    state.last_round = None
    state.phase = IN_PROGRESS

    logger.info("Ritual configured for %s (%d rounds)", name, round_limit)
    return state, [ritual_configured(name, round_limit)]


def _handle_submit_move(
    state: RitualState,
    action: Action,
    move_source: MoveSource,
) -> tuple[RitualState, list[RitualEvent]]:
    player_move = action.payload.get("move")
    if not is_valid_move(player_move):
        raise InvalidMove(player_move)

    computer_move = move_source.next_move()
    if not is_valid_move(computer_move):
        raise ValueError(f"Move source produced an invalid move: {computer_move!r}")

    outcome = resolve_outcome(player_move, computer_move)
    player_points, computer_points = score_delta(outcome)
    state.player_score += player_points
    state.computer_score += computer_points
    state.current_round += 1

    complete = state.current_round >= state.max_rounds
    if complete:
        state.phase = COMPLETE

    result = RoundResult(
        player_move=player_move,
        computer_move=computer_move,
        outcome=outcome,
        player_score=state.player_score,
        computer_score=state.computer_score,
        current_round=state.current_round,
        ritual_complete=complete,
    )
    state.last_round = result

    logger.debug(
        "Round %d/%d: %s vs %s -> %s",
        state.current_round, state.max_rounds, player_move, computer_move, outcome,
    )
    events = [round_resolved(
        state.current_round,
        player_move,
        computer_move,
        outcome,
        state.player_score,
        state.computer_score,
    )]

    if complete:
        verdict = final_verdict(state.player_score, state.computer_score)
        logger.info(
            "Ritual complete for %s: %d-%d (%s)",
            state.player_name, state.player_score, state.computer_score, verdict,
        )
        events.append(ritual_completed(state.player_score, state.computer_score, verdict))

    return state, events


def _handle_reset(state: RitualState, action: Action) -> tuple[RitualState, list[RitualEvent]]:
    preserve_identity = bool(action.payload.get("preserve_identity", True))

    # Nothing to preserve before the first configure
    if preserve_identity and not state.is_configured():
        preserve_identity = False

    state.current_round = 0
    state.player_score = 0
    state.computer_score = 0
    state.last_round = None
    if preserve_identity:
        state.phase = IN_PROGRESS
    else:
        state.player_name = None
        state.max_rounds = None
        state.phase = UNCONFIGURED

    logger.info("Ritual reset (preserve_identity=%s)", preserve_identity)
    return state, [ritual_reset(preserve_identity, state.player_name)]
