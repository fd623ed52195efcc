"""
FastAPI backend for The Ritual of Five Hands.
Each ritual session owns its own engine; sessions live in memory only.
"""

import traceback
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictInt, StrictStr

from ritual.config import CORS_ORIGINS, DEFAULT_MAX_ROUNDS, LOG_LEVEL, RANDOM_SEED, ROUND_OPTIONS, get_round_limit
from ritual.engine.definitions import BEATS, MOVES, parse_move
from ritual.engine.engine import RitualEngine
from ritual.engine.errors import InvalidConfiguration, InvalidMove, RitualNotInProgress
from ritual.engine.opponent import RandomMoveSource
from ritual.engine.queries import get_available_moves, get_ritual_summary
from ritual.engine.state import RitualState
from ritual.engine.utils import INTRO_MESSAGE, format_round_message, format_summary_message
from ritual.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

app = FastAPI(
    title="Ritual of Five Hands API",
    description="Rock, paper, scissors, lizard, spock against a random opponent",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    """Log method, path and status so failures can be traced to an endpoint."""
    method = request.method
    path = request.url.path
    try:
        response = await call_next(request)
    except Exception:
        logger.error("[500] %s %s (exception)", method, path)
        raise
    if response.status_code >= 500:
        logger.error("[%d] %s %s", response.status_code, method, path)
    else:
        logger.info("[%d] %s %s", response.status_code, method, path)
    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    """Return 500 JSON with the error text; full traceback goes to the log."""
    logger.error("Unhandled error on %s %s\n%s", request.method, request.url.path, traceback.format_exc())
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# In-memory sessions; key = ritual_id
rituals: dict[str, RitualEngine] = {}


# ===== Pydantic Models =====

class CreateRitualRequest(BaseModel):
    name: str
    """Option key from GET /round-options (e.g. 'quick') or a positive number. Omitted = default."""
    rounds: StrictStr | StrictInt | None = None


class MoveRequest(BaseModel):
    move: str


class ResetRequest(BaseModel):
    preserve_identity: bool = True


# ===== Helper Functions =====

def get_ritual(ritual_id: str) -> RitualEngine:
    """Get the engine for a session; raise 404 if not found."""
    engine = rituals.get(ritual_id)
    if engine is None:
        raise HTTPException(status_code=404, detail=f"Ritual {ritual_id} not found")
    return engine


def new_engine() -> RitualEngine:
    return RitualEngine(RandomMoveSource(RANDOM_SEED))


def state_for_response(state: RitualState) -> dict[str, Any]:
    """State dict plus what the UI needs to enable the hand buttons."""
    out = state.to_dict()
    out["available_moves"] = get_available_moves(state)
    return out


# ===== API Endpoints =====

@app.get("/")
def root():
    return {"message": "Ritual of Five Hands API", "version": "1.0.0"}


@app.get("/moves")
def list_moves():
    """The five hands and what each one defeats."""
    return {
        "moves": list(MOVES),
        "beats": {move: sorted(BEATS[move]) for move in MOVES},
    }


@app.get("/round-options")
def list_round_options():
    return {"options": ROUND_OPTIONS, "default": DEFAULT_MAX_ROUNDS}


@app.post("/rituals")
def create_ritual(request: CreateRitualRequest):
    """Setup step: name the player and pick the number of rounds."""
    engine = new_engine()
    try:
        round_limit = get_round_limit(request.rounds)
        state = engine.configure(request.name, round_limit)
    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))

    ritual_id = str(uuid.uuid4())
    rituals[ritual_id] = engine
    return {
        "ritual_id": ritual_id,
        "state": state_for_response(state),
        "events": [e.to_dict() for e in engine.drain_events()],
        "message": INTRO_MESSAGE,
    }


@app.get("/rituals/{ritual_id}")
def get_ritual_state(ritual_id: str):
    engine = get_ritual(ritual_id)
    state = engine.state
    return {
        "state": state_for_response(state),
        "summary": get_ritual_summary(state),
        "history": [r.to_dict() for r in engine.history],
    }


@app.post("/rituals/{ritual_id}/move")
def play_move(ritual_id: str, request: MoveRequest):
    """Play one hand. 409 once the ritual is complete."""
    engine = get_ritual(ritual_id)
    try:
        move = parse_move(request.move)
        result = engine.submit_move(move)
    except InvalidMove as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RitualNotInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))

    state = engine.state
    return {
        "result": result.to_dict(),
        "state": state_for_response(state),
        "events": [e.to_dict() for e in engine.drain_events()],
        "message": format_round_message(result),
        "summary_message": format_summary_message(state) if result.ritual_complete else None,
    }


@app.post("/rituals/{ritual_id}/reset")
def reset_ritual(ritual_id: str, request: ResetRequest):
    """New ritual: same player by default, or back to the setup step."""
    engine = get_ritual(ritual_id)
    state = engine.reset(request.preserve_identity)
    return {
        "state": state_for_response(state),
        "events": [e.to_dict() for e in engine.drain_events()],
        "message": INTRO_MESSAGE if state.is_configured() else None,
    }


@app.delete("/rituals/{ritual_id}")
def delete_ritual(ritual_id: str):
    get_ritual(ritual_id)
    del rituals[ritual_id]
    return {"deleted": ritual_id}


if __name__ == "__main__":
    import uvicorn
    setup_logging(LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=8000)
