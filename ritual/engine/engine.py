"""
Stateful wrapper around the reducer.
One RitualEngine per session; it owns its RitualState and swaps in a new
state only after an action succeeds, so failed calls change nothing.
Operations on one engine run one at a time, even when the API layer calls
in from several worker threads.
"""

import threading

from ritual.engine.state import RitualState, RoundResult
from ritual.engine.actions import Action, configure, submit_move, reset
from ritual.engine.events import RitualEvent
from ritual.engine.opponent import MoveSource, RandomMoveSource
from ritual.engine.reducer import apply_action


class RitualEngine:
    """
    Round resolution and ritual progression for a single player.

    Example:
        engine = RitualEngine()
        engine.configure("Ava", 3)
        result = engine.submit_move("rock")
    """

    def __init__(self, move_source: MoveSource | None = None):
        self._state = RitualState()
        self._move_source = move_source if move_source is not None else RandomMoveSource()
        self._history: list[RoundResult] = []
        self._pending_events: list[RitualEvent] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> RitualState:
        """Copy of the current state; mutating it does not affect the engine."""
        with self._lock:
            return self._state.copy()

    @property
    def history(self) -> list[RoundResult]:
        """Rounds played in the current ritual, oldest first."""
        with self._lock:
            return list(self._history)

    def configure(self, name: str, round_limit: int) -> RitualState:
        """Start a ritual. Raises InvalidConfiguration on a blank name or non-positive limit."""
        with self._lock:
            self._dispatch(configure(name, round_limit))
            self._history = []
            return self._state.copy()

    def submit_move(self, player_move: str) -> RoundResult:
        """
        Play one round.
        Raises RitualNotInProgress when unconfigured or complete; the state is left untouched
        and no computer hand is drawn.
        """
        with self._lock:
            self._dispatch(submit_move(player_move))
            result = self._state.last_round
            self._history.append(result)
            return result

    def is_complete(self) -> bool:
        with self._lock:
            return self._state.is_complete()

    def reset(self, preserve_identity: bool = True) -> RitualState:
        with self._lock:
            self._dispatch(reset(preserve_identity))
            self._history = []
            return self._state.copy()

    def drain_events(self) -> list[RitualEvent]:
        """Return events emitted since the last call and clear them."""
        with self._lock:
            events, self._pending_events = self._pending_events, []
            return events

    def _dispatch(self, action: Action) -> None:
        # Caller holds self._lock
        new_state, events = apply_action(self._state, action, self._move_source)
        self._state = new_state
        self._pending_events.extend(events)
