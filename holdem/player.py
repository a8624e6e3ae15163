"""
Player model for the Hold'em engine.

A Player carries a pluggable ``actor`` callable that decides its actions.
Human seats use a HumanActor mailbox filled by ``Game.submit_action``;
AI seats use ``holdem.ai.AIActor``. An actor returns an Action, or None
when it has nothing to play yet (a human who has not decided).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from holdem.deck import Card

if TYPE_CHECKING:
    from holdem.ai import Personality
    from holdem.betting_engine import Action, BettingRound


class PlayerKind(str, Enum):
    HUMAN = 'human'
    AI = 'ai'


@dataclass
class TurnView:
    """Everything an actor may look at when it is due to act."""
    player: 'Player'
    betting_round: 'BettingRound'
    community_cards: List[Card]
    active_player_count: int
    position: int
    pot: Optional[int] = None  # whole hand pot; None means only the street pot is known


class Player:
    def __init__(self, seat: int, kind: PlayerKind = PlayerKind.AI, chips: int = 1000,
                 name: Optional[str] = None, personality: Optional['Personality'] = None):
        if chips < 0:
            raise ValueError("chips must be non-negative")
        self.seat = seat
        self.kind = PlayerKind(kind)
        self.name = name or (f"Player {seat}" if self.kind == PlayerKind.AI else "You")
        self.personality = personality
        self.chips = chips
        self.hole_cards: List[Card] = []
        self.current_bet: int = 0  # chips put in during the current street
        self.folded: bool = False
        # actor(view) -> Action | None
        self.actor: Optional[Callable[[TurnView], Any]] = None

    def __repr__(self) -> str:
        return f"Player(seat={self.seat}, kind={self.kind.value}, chips={self.chips})"

    @property
    def id(self) -> int:
        return self.seat

    @property
    def is_ai(self) -> bool:
        return self.kind == PlayerKind.AI

    @property
    def is_all_in(self) -> bool:
        return self.chips == 0 and not self.folded

    @property
    def can_act(self) -> bool:
        return not self.folded and not self.is_all_in

    def add_card(self, card: Card) -> None:
        self.hole_cards.append(card)

    def clear_cards(self) -> None:
        self.hole_cards.clear()

    def bet(self, amount: int) -> int:
        """Move up to ``amount`` chips into this street's bet; returns what was actually paid."""
        actual = min(amount, self.chips)
        self.chips -= actual
        self.current_bet += actual
        return actual

    def fold(self) -> None:
        self.folded = True

    def reset_for_new_hand(self) -> None:
        self.folded = False
        self.current_bet = 0
        self.clear_cards()

    def take_action(self, view: TurnView) -> Optional['Action']:
        if self.actor is None:
            raise NotImplementedError("No action actor set for player")
        return self.actor(view)


class HumanActor:
    """Holds at most one pending action submitted from outside the engine."""

    def __init__(self):
        self.pending: Optional['Action'] = None

    def submit(self, action: 'Action') -> None:
        if self.pending is not None:
            logging.debug("Replacing pending human action %s with %s", self.pending, action)
        self.pending = action

    def clear(self) -> None:
        self.pending = None

    def __call__(self, view: TurnView) -> Optional['Action']:
        action, self.pending = self.pending, None
        return action
