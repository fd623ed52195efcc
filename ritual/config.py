"""
Single place for default ritual configuration.
Values can be overridden with RITUAL_* environment variables.
"""

import os

from ritual.engine.errors import InvalidConfiguration

# Round counts offered at the setup step (the round-count select in the UI).
ROUND_OPTIONS = {
    "quick": 3,
    "standard": 5,
    "long": 10,
}


def _env_int(name: str, default: int | None, positive: bool = False) -> int | None:
    """
    Integer from the environment; unset or unparsable means default.
    With positive=True, zero and negative values also fall back to default.
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if positive and value <= 0:
        return default
    return value


DEFAULT_MAX_ROUNDS = _env_int("RITUAL_DEFAULT_ROUNDS", 10, positive=True)

# Seed for the API's random opponents; unset means unseeded.
RANDOM_SEED = _env_int("RITUAL_SEED", None)

LOG_LEVEL = os.environ.get("RITUAL_LOG_LEVEL", "INFO")

_raw_origins = os.environ.get("RITUAL_CORS_ORIGINS")
if _raw_origins:
    CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["http://localhost:5173", "http://localhost:3000", "http://localhost:8080"]


def get_round_limit(option: str | int | None) -> int:
    """
    Resolve a round-count selection.
    Accepts an option key ("quick"), a positive integer, or a numeric string.
    None means DEFAULT_MAX_ROUNDS.
    """
    if option is None:
        return DEFAULT_MAX_ROUNDS
    if isinstance(option, bool):
        raise InvalidConfiguration(f"Invalid round selection: {option!r}")
    if isinstance(option, int):
        value = option
    else:
        key = str(option).strip().lower()
        if key in ROUND_OPTIONS:
            return ROUND_OPTIONS[key]
        try:
            value = int(key)
        except ValueError:
            raise InvalidConfiguration(
                f"Invalid round selection: {option!r}. "
                f"Choose one of {', '.join(ROUND_OPTIONS)} or a positive number"
            ) from None
    if value <= 0:
        raise InvalidConfiguration(f"Round limit must be positive, got {value}")
    return value
