"""
Main entry point for The Ritual of Five Hands engine.
Demonstrates core functionality with a scripted opponent.
"""

from ritual.config import LOG_LEVEL
from ritual.engine.engine import RitualEngine
from ritual.engine.errors import InvalidConfiguration, RitualNotInProgress
from ritual.engine.opponent import SequenceMoveSource
from ritual.engine.queries import get_final_verdict
from ritual.logging_config import setup_logging
from ritual.engine.utils import (
    INTRO_MESSAGE,
    format_round_message,
    format_summary_message,
    print_ritual_state,
)


def main():
    setup_logging(LOG_LEVEL)
    print("The Ritual of Five Hands - Engine Demo")
    print("=" * 60)

    # ===== SCENARIO 1: Setup validation =====
    print("\n[SCENARIO 1: Setup Validation]")
    engine = RitualEngine(SequenceMoveSource(["scissors", "rock", "paper"]))
    for name, rounds in (("", 5), ("Bo", 0)):
        try:
            engine.configure(name, rounds)
            print(f"✗ configure({name!r}, {rounds}) should have failed")
        except InvalidConfiguration as e:
            print(f"✓ configure({name!r}, {rounds}) rejected: {e}")
    print(f"Phase after rejected setup: {engine.state.phase}")

    # ===== SCENARIO 2: Three-round ritual =====
    print("\n[SCENARIO 2: Three Rounds - Win, Draw, Lose]")
    engine.configure("Ava", 3)
    print(INTRO_MESSAGE)
    for _ in range(3):
        result = engine.submit_move("rock")
        print(f"  Round {result.current_round}: {format_round_message(result)}")
    print(f"  Events: {[e.type for e in engine.drain_events()]}")
    print_ritual_state(engine.state)
    print(f"Verdict: {get_final_verdict(engine.state)}")

    # ===== SCENARIO 3: Moves after completion are ignored =====
    print("\n[SCENARIO 3: Late Move]")
    try:
        engine.submit_move("spock")
    except RitualNotInProgress as e:
        print(f"✓ Ignored: {e}")
    print(f"Round still {engine.state.current_round}/{engine.state.max_rounds}")

    # ===== SCENARIO 4: Same player again =====
    print("\n[SCENARIO 4: Reset, Same Player]")
    state = engine.reset(preserve_identity=True)
    print(f"{state.player_name} starts over: phase={state.phase}, round={state.current_round}")

    # ===== SCENARIO 5: Full restart =====
    print("\n[SCENARIO 5: Full Restart]")
    state = engine.reset(preserve_identity=False)
    print(f"Phase={state.phase}, player={state.player_name}")

    # ===== SCENARIO 6: Longer ritual against a cycling opponent =====
    print("\n[SCENARIO 6: Five Rounds vs Cycling Opponent]")
    engine = RitualEngine(SequenceMoveSource(["lizard", "spock", "paper"], cycle=True))
    engine.configure("Cass", 5)
    for move in ("rock", "paper", "scissors", "lizard", "spock"):
        engine.submit_move(move)
    for result in engine.history:
        print(f"  Round {result.current_round}: {format_round_message(result)}")
    print(format_summary_message(engine.state))


if __name__ == "__main__":
    main()
