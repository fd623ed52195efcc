"""
Engine errors.
All subclass ValueError so callers that catch rule violations generically keep working.
"""


class RitualError(ValueError):
    """Base class for ritual rule violations."""


class InvalidConfiguration(RitualError):
    """Blank player name or non-positive round limit."""


class RitualNotInProgress(RitualError):
    """A move was submitted while the ritual is unconfigured or already complete."""

    def __init__(self, phase: str):
        self.phase = phase
        super().__init__(f"Ritual is not in progress (phase: {phase})")


class InvalidMove(RitualError):
    """Value is not one of the five hands."""

    def __init__(self, move: object):
        self.move = move
        super().__init__(f"Unknown move {move!r}. Expected one of: rock, paper, scissors, lizard, spock")
