from holdem.game import GamePhase
from holdem.terminal_ui import TerminalUI
from holdem.ui import Colors, cards_horizontal
from holdem.deck import parse_card


def test_cards_horizontal_lays_cards_side_by_side():
    text = Colors.strip(cards_horizontal([parse_card("Ah"), parse_card("10s")], hidden=1))
    lines = text.split("\n")
    assert len(lines) == 5
    assert "A ♥" in lines[1]
    assert "10♠" in lines[1]
    assert "░" in lines[2]
    assert cards_horizontal([]) == ""


def test_render_for_human_on_turn(make_game):
    game = make_game(human_seats=[0])
    game.run()
    ui = TerminalUI(viewer=0, clear_screen=False)

    text = Colors.strip(ui.render(game.snapshot(viewer=0), game.legal_actions(0)))

    assert "POT: $30" in text
    assert "Current bet: $20" in text
    assert "You [D]: $1000" in text
    assert "Player 1 [SB]: $990 (bet: $10)" in text
    assert "Player 2 [BB]: $980 (bet: $20)" in text
    assert "Your Cards:" in text
    assert "YOUR TURN" in text
    assert "Your options: FOLD" in text


def test_render_waiting_and_result(make_game):
    game = make_game(human_seats=[2], scripts={0: [{"action": "fold"}], 1: [{"action": "fold"}]})
    game.run(until=lambda g: g.phase == GamePhase.GAME_OVER)
    ui = TerminalUI(viewer=2, show_tips=False)

    text = Colors.strip(ui.render(game.snapshot(viewer=2)))

    assert "You wins $30 (uncontested)" in text
    assert "Recent Actions:" in text
    assert "Player 1 folded" in text
