from wordle_term.display import (
    GRAY_BG, GREEN_BG, RESET, YELLOW_BG, banner, final_message, render_row, share_grid,
)
from wordle_term.game import Outcome


def test_banner_mentions_budget():
    lines = banner(6)
    assert lines[0] == "=" * 40
    assert "Guess the 5-letter word in 6 attempts!" in lines


def test_colored_row():
    row = render_row("PAPER", [1, 1, 2, 1, 0])
    assert row.startswith(YELLOW_BG)
    assert GREEN_BG in row and GRAY_BG in row
    assert row.count(RESET) == 5
    assert " R " in row


def test_plain_row():
    assert render_row("PAPER", [1, 1, 2, 1, 0], color=False) == "(P)(A)[P](E) R "


def test_share_grid():
    grid = share_grid([("PAPER", [1, 1, 2, 1, 0]), ("APPLE", [2, 2, 2, 2, 2])])
    assert grid == "🟨🟨🟩🟨⬛\n🟩🟩🟩🟩🟩"


def test_final_message_win_singular_and_plural():
    assert "You solved it in 1 attempt!" in final_message(Outcome(True, 1))
    assert "You solved it in 3 attempts!" in final_message(Outcome(True, 3))


def test_final_message_loss():
    lines = final_message(Outcome(False, 6, "ROBOT"))
    assert "Game Over!" in lines
    assert "The word was: ROBOT" in lines
