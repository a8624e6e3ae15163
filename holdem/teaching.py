"""
Teaching helpers: short explanations of each phase, the hand-rankings
guide and a verdict on a pair of starting cards.
"""

from typing import Any, Dict, List, Sequence, Tuple

from holdem.deck import Card
from holdem.hand_evaluation import HandCategory, category_name

PHASE_EXPLANATIONS = {
    'setup': "Game is starting! Each player gets 2 hole cards and starts with chips.",
    'dealing': "Dealing phase - each player receives 2 private cards. Small and big blinds are posted.",
    'preflop': "Pre-Flop betting - decide using only your 2 hole cards. The big blind sets the bet to match.",
    'flop': "Flop - 3 community cards revealed! You can now make poker hands with 5 cards.",
    'turn': "Turn - the 4th community card is revealed. Your hand possibilities are becoming clearer.",
    'river': "River - the final community card! Last chance to bet with complete information.",
    'showdown': "Showdown - remaining players reveal their cards. Best 5-card hand wins the pot!",
    'game_over': "Hand over. When only one player has chips left, that player wins the game.",
}

HAND_RANKINGS: List[Tuple[HandCategory, str]] = [
    (HandCategory.ROYAL_FLUSH, "A, K, Q, J, 10 all of the same suit"),
    (HandCategory.STRAIGHT_FLUSH, "5 consecutive cards of the same suit"),
    (HandCategory.FOUR_OF_A_KIND, "4 cards of the same rank"),
    (HandCategory.FULL_HOUSE, "Three of a kind plus a pair"),
    (HandCategory.FLUSH, "5 cards of the same suit"),
    (HandCategory.STRAIGHT, "5 consecutive cards"),
    (HandCategory.THREE_OF_A_KIND, "3 cards of the same rank"),
    (HandCategory.TWO_PAIR, "2 pairs of different ranks"),
    (HandCategory.ONE_PAIR, "2 cards of the same rank"),
    (HandCategory.HIGH_CARD, "No matching cards"),
]

_RANK_WORDS = {
    14: "Ace", 13: "King", 12: "Queen", 11: "Jack", 10: "Ten", 9: "Nine", 8: "Eight",
    7: "Seven", 6: "Six", 5: "Five", 4: "Four", 3: "Three", 2: "Two",
}


def phase_explanation(phase) -> str:
    key = getattr(phase, 'value', phase)
    return PHASE_EXPLANATIONS.get(key, "")


def rankings_guide() -> List[str]:
    return [f"{i}. {category_name(cat)} - {text}" for i, (cat, text) in enumerate(HAND_RANKINGS, 1)]


def analyze_starting_hand(hole_cards: Sequence[Card]) -> str:
    if len(hole_cards) != 2:
        return "Waiting for cards..."

    (r1, s1), (r2, s2) = hole_cards
    if r1 == r2:
        name = _RANK_WORDS[r1] + ("es" if r1 == 6 else "s")
        if r1 >= 11:
            return f"EXCELLENT! Pocket {name} - premium starting hand. Consider raising."
        if r1 >= 8:
            return f"GOOD! Pocket {name} - solid hand, you can raise or call confidently."
        return f"Pocket {name} - small pairs can be tricky. Consider the betting action."

    high, low = max(r1, r2), min(r1, r2)
    suited = s1 == s2
    suitedness = "suited" if suited else "offsuit"
    high_name, low_name = _RANK_WORDS[high], _RANK_WORDS[low]

    if high == 14:
        if low >= 10:
            return f"EXCELLENT! Ace-{low_name} {suitedness} - premium hand. Strong raise or call."
        if low >= 7:
            return f"GOOD! Ace-{low_name} {suitedness} - playable. Consider position and betting."
        return f"MARGINAL: Ace-{low_name} {suitedness} - weak kicker, be careful with heavy betting."
    if high >= 12 and low >= 10:
        return f"GOOD! {high_name}-{low_name} {suitedness} - solid hand for most situations."
    if suited and high - low <= 4:
        return f"{high_name}-{low_name} suited - potential for straights and flushes. Play cautiously."
    return f"WEAK: {high_name}-{low_name} {suitedness} - marginal hand. Consider folding to heavy betting."


def describe_options(legal_actions: Sequence[Dict[str, Any]]) -> str:
    """One-line hint built from ``Game.legal_actions``."""
    parts = []
    for option in legal_actions:
        kind = option['action']
        if kind == 'fold':
            parts.append("FOLD (quit this hand)")
        elif kind == 'check':
            parts.append("CHECK (pass for free)")
        elif kind == 'call':
            parts.append(f"CALL ${option['amount']} (match the bet)")
        elif kind == 'raise':
            parts.append(f"RAISE by ${option['min_amount']}-${option['max_amount']}")
    return "Your options: " + ", ".join(parts) if parts else "Nothing to do right now."
