from holdem.deck import parse_card
from holdem.game import GamePhase
from holdem.teaching import analyze_starting_hand, describe_options, phase_explanation, rankings_guide


def cards(*specs):
    return [parse_card(spec) for spec in specs]


def test_every_phase_has_an_explanation():
    for phase in GamePhase:
        assert phase_explanation(phase)
    assert phase_explanation("flop").startswith("Flop")
    assert phase_explanation("nonsense") == ""


def test_rankings_guide_lists_ten_hands_best_first():
    guide = rankings_guide()
    assert len(guide) == 10
    assert guide[0].startswith("1. Royal Flush")
    assert guide[-1].startswith("10. High Card")


def test_starting_hand_verdicts():
    assert analyze_starting_hand(cards("Ah", "As")).startswith("EXCELLENT! Pocket Aces")
    assert "Pocket Sixes" in analyze_starting_hand(cards("6h", "6s"))
    assert analyze_starting_hand(cards("Ah", "Kh")).startswith("EXCELLENT! Ace-King suited")
    assert analyze_starting_hand(cards("Ah", "4d")).startswith("MARGINAL")
    assert analyze_starting_hand(cards("9h", "8h")).startswith("Nine-Eight suited")
    assert analyze_starting_hand(cards("9h", "2d")).startswith("WEAK")
    assert analyze_starting_hand([]) == "Waiting for cards..."


def test_describe_options():
    text = describe_options([
        {"action": "fold", "amount": 0},
        {"action": "call", "amount": 20},
        {"action": "raise", "amount": 0, "min_amount": 20, "max_amount": 980},
    ])
    assert text.startswith("Your options: FOLD")
    assert "CALL $20" in text
    assert "RAISE by $20-$980" in text
    assert describe_options([]) == "Nothing to do right now."
