#!/usr/bin/env python3
"""
Interactive CLI for playing the ritual in a terminal.
Run: python test/play_cli.py
"""

import sys
from ritual.config import DEFAULT_MAX_ROUNDS, ROUND_OPTIONS, get_round_limit
from ritual.engine.definitions import MOVES, MOVE_SHORTCUTS, parse_move
from ritual.engine.engine import RitualEngine
from ritual.engine.errors import InvalidConfiguration, InvalidMove, RitualNotInProgress
from ritual.engine.events import RITUAL_COMPLETED
from ritual.engine.queries import get_available_moves
from ritual.logging_config import setup_logging
from ritual.engine.utils import (
    INTRO_MESSAGE,
    format_round_message,
    format_scoreboard,
    format_summary_message,
)


def print_header(engine):
    print("=" * 60)
    print(f"  {format_scoreboard(engine.state)}")
    print("=" * 60)


def prompt_setup(engine):
    """Collect name and round count until the engine accepts them."""
    options = ", ".join(f"{k} ({v})" for k, v in ROUND_OPTIONS.items())
    while True:
        name = input("\nWhat is your name, seeker? ").strip()
        rounds = input(f"How many rounds? {options} [default {DEFAULT_MAX_ROUNDS}]: ").strip()
        try:
            engine.configure(name, get_round_limit(rounds or None))
            return
        except InvalidConfiguration as e:
            print(f"✗ {e}")


def prompt_move():
    hands = ", ".join(f"({k}) {v}" for k, v in MOVE_SHORTCUTS.items())
    while True:
        choice = input(f"\nChoose your hand - {hands}: ")
        try:
            return parse_move(choice)
        except InvalidMove:
            print(f"❌ Invalid choice. Enter one of: {', '.join(MOVES)}")


def play_ritual(engine):
    print(f"\n{INTRO_MESSAGE}")
    while get_available_moves(engine.state):
        print_header(engine)
        move = prompt_move()
        try:
            result = engine.submit_move(move)
        except RitualNotInProgress:
            # UI already disables input once complete
            break
        print(format_round_message(result))
        for e in engine.drain_events():
            if e.type == RITUAL_COMPLETED:
                print(f"\n{format_summary_message(engine.state)}")


def main_loop():
    # Engine INFO lines would interleave with the prompts
    setup_logging("WARNING")
    print("=" * 60)
    print("  THE RITUAL OF FIVE HANDS")
    print("=" * 60)

    engine = RitualEngine()
    prompt_setup(engine)

    while True:
        play_ritual(engine)
        choice = input("\n(a)gain, (n)ew player, (q)uit: ").strip().lower()
        if choice in ("a", "again"):
            engine.reset(preserve_identity=True)
        elif choice in ("n", "new"):
            engine.reset(preserve_identity=False)
            prompt_setup(engine)
        else:
            print("The circle closes. Farewell.")
            return


if __name__ == "__main__":
    try:
        main_loop()
    except KeyboardInterrupt:
        print("\n\nRitual interrupted. Goodbye!")
        sys.exit(0)
