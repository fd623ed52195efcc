"""
Text helpers for presenting ritual state.
Formatting only; all rules live in the reducer.
"""

from ritual.engine.state import RitualState, RoundResult
from ritual.engine.resolution import WIN, LOSE, VICTORY, DEFEAT, final_verdict

INTRO_MESSAGE = "Click a hand to begin the ritual."

_ROUND_ENDINGS = {
    WIN: "You win this round.",
    LOSE: "You lose this round.",
}

_VERDICT_ENDINGS = {
    VICTORY: "You emerge from the circle victorious.",
    DEFEAT: "The opponent claims this ritual.",
}


def format_round_message(result: RoundResult) -> str:
    """Feedback line for a single round."""
    text = f"You chose {result.player_move}, the opponent chose {result.computer_move}. "
    return text + _ROUND_ENDINGS.get(result.outcome, "The round is a draw.")


def format_summary_message(state: RitualState) -> str:
    """Closing line once the last round has been played."""
    text = (
        f"The ritual is complete. Final score — You: {state.player_score}, "
        f"Opponent: {state.computer_score}. "
    )
    verdict = final_verdict(state.player_score, state.computer_score)
    return text + _VERDICT_ENDINGS.get(verdict, "The ritual ends in perfect balance.")


def format_scoreboard(state: RitualState) -> str:
    name = state.player_name or "You"
    max_rounds = state.max_rounds if state.max_rounds is not None else "-"
    return (
        f"{name}: {state.player_score}  |  Opponent: {state.computer_score}  |  "
        f"Round {state.current_round}/{max_rounds}"
    )


def print_ritual_state(state: RitualState) -> None:
    """Pretty-print the ritual state to the terminal."""
    print(f"\n{'='*60}")
    print(f"  {format_scoreboard(state)}")
    print(f"  Phase: {state.phase}")
    if state.last_round:
        print(f"  {format_round_message(state.last_round)}")
    if state.is_complete():
        print(f"  {format_summary_message(state)}")
    print(f"{'='*60}")
