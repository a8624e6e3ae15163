"""
Deck and card operations for the Hold'em engine.

Cards are small immutable tuples so they hash, compare and unpack the
same way everywhere: ``rank, suit = card``.
"""

import random
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional

# 2-14 (where 11=J, 12=Q, 13=K, 14=A)
RANKS = list(range(2, 15))
RANK_NAMES = {11: 'J', 12: 'Q', 13: 'K', 14: 'A'}


class Suit(str, Enum):
    HEARTS = 'h'
    DIAMONDS = 'd'
    CLUBS = 'c'
    SPADES = 's'

    @property
    def symbol(self) -> str:
        return {'h': '♥', 'd': '♦', 'c': '♣', 's': '♠'}[self.value]


class Card(NamedTuple):
    rank: int
    suit: Suit

    def __str__(self) -> str:
        return card_str(self)


class DeckExhaustedError(RuntimeError):
    """Raised when a card is requested from an empty deck."""


def make_deck() -> List[Card]:
    """Create a standard 52-card deck."""
    return [Card(r, s) for s in Suit for r in RANKS]


def card_str(card: Card) -> str:
    """Convert a card to its string representation."""
    r, s = card
    return f"{RANK_NAMES.get(r, r)}{Suit(s).value}"


def parse_card(text: str) -> Card:
    """Parse strings like 'Ah', 'Td' or '10s' into a Card."""
    text = text.strip()
    if len(text) < 2:
        raise ValueError(f"Cannot parse card {text!r}")
    rank_part, suit_part = text[:-1].upper(), text[-1].lower()
    lookup = {v: k for k, v in RANK_NAMES.items()}
    lookup['T'] = 10
    try:
        rank = lookup[rank_part] if rank_part in lookup else int(rank_part)
        suit = Suit(suit_part)
    except ValueError:
        raise ValueError(f"Cannot parse card {text!r}") from None
    if rank not in RANKS:
        raise ValueError(f"Cannot parse card {text!r}")
    return Card(rank, suit)


class Deck:
    """Ordered, shuffleable stack of the 52 cards. Cards are dealt off the end."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self.cards: List[Card] = make_deck()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card) -> bool:
        return card in self.cards

    def shuffle(self) -> None:
        self._rng.shuffle(self.cards)

    def reset(self) -> None:
        """Restore all 52 cards and shuffle them."""
        self.cards = make_deck()
        self.shuffle()

    def deal(self) -> Card:
        if not self.cards:
            raise DeckExhaustedError("Cannot deal from an empty deck")
        return self.cards.pop()

    def deal_many(self, num_cards: int) -> List[Card]:
        """Deal a number of cards from the top of the deck."""
        if len(self.cards) < num_cards:
            raise DeckExhaustedError(f"Cannot deal {num_cards} cards from deck of {len(self.cards)}")
        return [self.deal() for _ in range(num_cards)]


def create_shuffled_deck(rng: Optional[random.Random] = None) -> Deck:
    """Create and return a shuffled deck."""
    deck = Deck(rng)
    deck.shuffle()
    return deck
