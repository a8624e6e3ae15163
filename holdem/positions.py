"""
Dealer button and blind positions.
"""

import logging
from typing import List


class GamePosition:
    """Tracks the dealer button and derives blind seats and acting orders from it."""

    def __init__(self, total_players: int, small_blind_amount: int = 10,
                 big_blind_amount: int = 20, dealer_button: int = 0):
        if total_players < 2:
            raise ValueError("A game needs at least two players")
        self.total_players = total_players
        self.small_blind_amount = small_blind_amount
        self.big_blind_amount = big_blind_amount
        self.dealer_button = dealer_button % total_players

    def __repr__(self) -> str:
        return (f"GamePosition(dealer_button={self.dealer_button}, "
                f"blinds={self.small_blind_amount}/{self.big_blind_amount}, "
                f"total_players={self.total_players})")

    def _offset(self, n: int) -> int:
        return (self.dealer_button + n) % self.total_players

    def small_blind_seat(self) -> int:
        return self._offset(1)

    def big_blind_seat(self) -> int:
        return self._offset(2)

    def first_to_act_preflop(self) -> int:
        return self._offset(3)

    def betting_order(self, preflop: bool) -> List[int]:
        """Every seat in acting order: pre-flop from the seat after the big blind,
        post-flop from the small blind."""
        start = self.first_to_act_preflop() if preflop else self.small_blind_seat()
        return [(start + i) % self.total_players for i in range(self.total_players)]

    def advance_dealer_button(self) -> int:
        self.dealer_button = self._offset(1)
        logging.info(f"Dealer button moved to seat {self.dealer_button}")
        return self.dealer_button
