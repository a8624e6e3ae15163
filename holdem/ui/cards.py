"""
Card rendering for the terminal table view: small boxed cards laid out
side by side.
"""

from typing import List, Sequence

from holdem.deck import RANK_NAMES, Card, Suit

from .colors import Colors

SUIT_SYMBOLS = {suit.value: suit.symbol for suit in Suit}

SUIT_COLORS = {
    'h': Colors.RED,
    'd': Colors.RED,
    'c': Colors.BLACK,
    's': Colors.BLACK,
}

CARD_HEIGHT = 5


def card_art(card: Card) -> List[str]:
    """Format a single card as CARD_HEIGHT lines."""
    r, s = card
    suit = Suit(s).value
    rank = RANK_NAMES.get(r, str(r))
    symbol = SUIT_SYMBOLS[suit]
    color = f"{Colors.BOLD}{Colors.BG_WHITE}{SUIT_COLORS[suit]}"

    # rank is 1 or 2 characters wide
    return [
        f"{color}╭───╮{Colors.RESET}",
        f"{color}│{rank:<2}{symbol}│{Colors.RESET}",
        f"{color}│   │{Colors.RESET}",
        f"{color}│{symbol}{rank:>2}│{Colors.RESET}",
        f"{color}╰───╯{Colors.RESET}",
    ]


def card_back() -> List[str]:
    color = f"{Colors.BOLD}{Colors.CYAN}"
    return [f"{color}{line}{Colors.RESET}" for line in ("╭───╮", "│░░░│", "│░░░│", "│░░░│", "╰───╯")]


def cards_horizontal(cards: Sequence[Card], hidden: int = 0) -> str:
    """Render cards side by side, followed by ``hidden`` face-down cards."""
    art = [card_art(card) for card in cards] + [card_back() for _ in range(hidden)]
    if not art:
        return ""
    return "\n".join(" ".join(lines[i] for lines in art) for i in range(CARD_HEIGHT))
