"""
Feedback and summary text.
"""

from ritual.engine.state import COMPLETE, RitualState, RoundResult
from ritual.engine.utils import format_round_message, format_scoreboard, format_summary_message


def round_result(outcome, player="rock", computer="scissors"):
    return RoundResult(
        player_move=player,
        computer_move=computer,
        outcome=outcome,
        player_score=0,
        computer_score=0,
        current_round=1,
        ritual_complete=False,
    )


def test_round_messages():
    assert format_round_message(round_result("win")) == (
        "You chose rock, the opponent chose scissors. You win this round."
    )
    assert format_round_message(round_result("lose", computer="paper")).endswith("You lose this round.")
    assert format_round_message(round_result("draw", computer="rock")).endswith("The round is a draw.")


def test_summary_messages():
    state = RitualState(player_name="Ava", max_rounds=3, current_round=3,
                        player_score=2, computer_score=1, phase=COMPLETE)
    assert format_summary_message(state) == (
        "The ritual is complete. Final score — You: 2, Opponent: 1. "
        "You emerge from the circle victorious."
    )
    state.player_score = 0
    assert format_summary_message(state).endswith("The opponent claims this ritual.")
    state.player_score = 1
    assert format_summary_message(state).endswith("The ritual ends in perfect balance.")


def test_scoreboard():
    state = RitualState(player_name="Ava", max_rounds=5, current_round=2, player_score=1)
    assert format_scoreboard(state) == "Ava: 1  |  Opponent: 0  |  Round 2/5"
    assert format_scoreboard(RitualState()) == "You: 0  |  Opponent: 0  |  Round 0/-"
