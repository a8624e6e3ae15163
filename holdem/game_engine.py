"""
Per-hand table state: the deck, dealing, community cards, the pot carried
between streets and the running action history.
"""

import logging
import random
from typing import Dict, List, Optional

from holdem.deck import Card, Deck, card_str
from holdem.player import Player


class GameEngine:
    """Owns the deck and the shared cards for the hand in progress."""

    def __init__(self, players: List[Player], rng: Optional[random.Random] = None):
        self.players = players
        self.deck = Deck(rng)
        self.community: List[Card] = []
        self.pot = 0  # chips from streets that have already finished
        self.action_history: List[str] = []

    @property
    def players_by_seat(self) -> Dict[int, Player]:
        return {p.seat: p for p in self.players}

    def reset_round(self) -> None:
        """Reset the table for a new hand: fresh shuffled deck, empty board and pot."""
        self.deck.reset()
        self.pot = 0
        self.community = []
        self.action_history = []
        for p in self.players:
            p.reset_for_new_hand()
            if p.chips == 0:
                # busted seats sit the hand out
                p.folded = True

    def draw(self, n: int = 1) -> List[Card]:
        """Draw n cards from the deck."""
        return self.deck.deal_many(n)

    def deal_hole_cards(self) -> None:
        """Deal 2 hole cards to each seat still in the hand, one card at a time."""
        in_hand = [p for p in self.players if not p.folded]
        for _ in range(2):
            for p in in_hand:
                p.add_card(self.draw(1)[0])
        logging.debug("Hole cards dealt to %d players", len(in_hand))

    def _deal_community(self, n: int, street: str) -> List[Card]:
        cards = self.draw(n)
        self.community.extend(cards)
        self.action_history.append(f"{street}: {' '.join(card_str(c) for c in cards)}")
        logging.info(f"{street} dealt: {len(self.community)} community cards")
        return cards

    def deal_flop(self) -> List[Card]:
        return self._deal_community(3, "Flop")

    def deal_turn(self) -> List[Card]:
        return self._deal_community(1, "Turn")

    def deal_river(self) -> List[Card]:
        return self._deal_community(1, "River")

    def collect_bets(self, street_pot: int) -> None:
        """Carry a finished street's pot into the hand pot and clear street bets."""
        self.pot += street_pot
        for p in self.players:
            p.current_bet = 0

    def cards_in_play(self) -> List[Card]:
        dealt = [c for p in self.players for c in p.hole_cards]
        return dealt + list(self.community)
