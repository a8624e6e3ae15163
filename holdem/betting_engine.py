"""
Betting logic for the Hold'em engine.

A BettingRound manages one street: who still has to act (a FIFO queue in
the order produced by GamePosition), the bet to match, the minimum raise
and the chips put into the pot during the street. It never asks anybody
for a decision; the game controller feeds it one action at a time.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from holdem.player import Player


class ActionType(str, Enum):
    FOLD = 'fold'
    CHECK = 'check'
    CALL = 'call'
    RAISE = 'raise'


@dataclass(frozen=True)
class Action:
    type: ActionType
    amount: int = 0  # raise size on top of the current bet; unused otherwise

    def __str__(self) -> str:
        if self.type == ActionType.RAISE:
            return f"raise {self.amount}"
        return self.type.value

    @classmethod
    def fold(cls) -> 'Action':
        return cls(ActionType.FOLD)

    @classmethod
    def check(cls) -> 'Action':
        return cls(ActionType.CHECK)

    @classmethod
    def call(cls) -> 'Action':
        return cls(ActionType.CALL)

    @classmethod
    def raise_by(cls, amount: int) -> 'Action':
        if amount <= 0:
            raise ValueError(f"Raise amount must be positive, got {amount}")
        return cls(ActionType.RAISE, int(amount))

    @classmethod
    def parse(cls, value: Union['Action', Dict[str, Any]]) -> 'Action':
        """Accept an Action or a dict like {'action': 'raise', 'amount': 40}."""
        if isinstance(value, Action):
            if value.type == ActionType.RAISE and value.amount <= 0:
                raise ValueError(f"Raise amount must be positive, got {value.amount}")
            return value
        if not isinstance(value, dict):
            raise ValueError(f"Unrecognised action {value!r}")

        name = str(value.get('action', '')).lower()
        if name == 'bet':
            name = 'raise'
        try:
            kind = ActionType(name)
        except ValueError:
            raise ValueError(f"Unknown action {name!r}") from None
        if kind == ActionType.RAISE:
            return cls.raise_by(int(value.get('amount', 0)))
        return cls(kind)

    def to_dict(self) -> Dict[str, Any]:
        return {'action': self.type.value, 'amount': self.amount}


class BettingRound:
    """State of a single betting street."""

    def __init__(self, seat_ids: Iterable[int], forced_bet: int = 0, min_raise: Optional[int] = None):
        self.acting_order: List[int] = list(seat_ids)
        self.players_to_act = deque(self.acting_order)
        self.current_bet = forced_bet
        self.min_raise = forced_bet if min_raise is None else min_raise
        self.pot = 0
        self.complete = False

    def __repr__(self) -> str:
        return (f"BettingRound(current_bet={self.current_bet}, min_raise={self.min_raise}, "
                f"pot={self.pot}, to_act={list(self.players_to_act)}, complete={self.complete})")

    def set_acting_order(self, seat_ids: Iterable[int]) -> None:
        """Replace the acting order and refill the queue, keeping bets and pot."""
        self.acting_order = list(seat_ids)
        self.players_to_act = deque(self.acting_order)
        self.complete = False
        logging.debug("Betting order set - players to act: %s", list(self.players_to_act))

    def position_of(self, seat: int) -> int:
        """0 for the first seat in this street's acting order; higher numbers act later."""
        return self.acting_order.index(seat) if seat in self.acting_order else 0

    def peek_next(self) -> Optional[int]:
        return self.players_to_act[0] if self.players_to_act else None

    def advance(self) -> Optional[int]:
        """Remove and return the next seat to act; an exhausted queue marks the round complete."""
        if self.players_to_act:
            seat = self.players_to_act.popleft()
            logging.debug("Next player to act: %s, remaining: %s", seat, list(self.players_to_act))
            return seat
        self.complete = True
        logging.debug("Betting round complete - no more players to act")
        return None

    def skip_idle(self, players: Dict[int, Player]) -> List[int]:
        """Drop folded and all-in seats from the front of the queue."""
        skipped = []
        while self.players_to_act:
            player = players.get(self.players_to_act[0])
            if player is not None and player.can_act:
                break
            skipped.append(self.players_to_act.popleft())
        return skipped

    def requeue_unmatched(self, players: Dict[int, Player]) -> List[int]:
        """Queue every seat that can still act but has not matched the current bet."""
        owing = [seat for seat in self.acting_order
                 if seat in players and players[seat].can_act
                 and players[seat].current_bet < self.current_bet
                 and seat not in self.players_to_act]
        self.players_to_act.extend(owing)
        return owing

    def call_amount(self, player: Player) -> int:
        return max(self.current_bet - player.current_bet, 0)

    def post_blind(self, player: Player, amount: int) -> int:
        """Post a forced bet, clamped to the player's chips."""
        paid = player.bet(amount)
        self.pot += paid
        return paid

    def _reopen(self, raiser: Player, players: Optional[Dict[int, Player]]) -> None:
        # everybody after the raiser, in acting order, must respond again
        order = self.acting_order
        if raiser.seat in order:
            idx = order.index(raiser.seat)
            rotated = order[idx + 1:] + order[:idx]
        else:
            rotated = [seat for seat in order if seat != raiser.seat]
        if players is not None:
            rotated = [seat for seat in rotated if seat in players and players[seat].can_act]
        self.players_to_act = deque(rotated)
        self.complete = False

    def apply_action(self, player: Player, action: Action,
                     players: Optional[Dict[int, Player]] = None) -> str:
        """Apply one action for ``player`` and return a line for the action history."""
        if player.folded:
            logging.warning("Ignoring %s from folded player %s", action, player.name)
            return f"{player.name} cannot act (folded)"

        call_amount = self.call_amount(player)

        if action.type == ActionType.FOLD:
            player.fold()
            return f"{player.name} folded"

        if action.type == ActionType.CHECK:
            if call_amount == 0:
                return f"{player.name} checked"
            # can't check facing a bet; treat it as a call
            pay = player.bet(call_amount)
            self.pot += pay
            suffix = " (all-in)" if player.chips == 0 else ""
            return f"{player.name} called ${pay} (check converted to call){suffix}"

        if action.type == ActionType.CALL:
            if call_amount == 0:
                return f"{player.name} checked"
            pay = player.bet(call_amount)
            self.pot += pay
            if player.chips == 0:
                return f"{player.name} called ${pay} (all-in)"
            return f"{player.name} called ${pay}"

        # raise
        total_bet = self.current_bet + action.amount
        needed = total_bet - player.current_bet
        if player.chips >= needed:
            player.bet(needed)
            self.pot += needed
            self.current_bet = total_bet
            self.min_raise = action.amount
            self._reopen(player, players)
            suffix = " (all-in)" if player.chips == 0 else ""
            return f"{player.name} raised to ${total_bet}{suffix}"

        # can't cover the raise: all-in for whatever is left
        pay = player.bet(player.chips)
        self.pot += pay
        if player.current_bet > self.current_bet:
            self.current_bet = player.current_bet
            self._reopen(player, players)
        return f"{player.name} went all-in with ${pay}"

    def check_complete(self, players: Iterable[Player]) -> bool:
        """Update and return ``complete`` from the state of the table."""
        if self.complete:
            return True

        active = [p for p in players if not p.folded]
        if len(active) <= 1:
            self.complete = True
            logging.debug("Betting complete - only %d active players remain", len(active))
            return True

        all_matched = all(p.current_bet >= self.current_bet or p.chips == 0 for p in active)
        if not self.players_to_act and all_matched:
            self.complete = True
            logging.debug("Betting round complete - %d players remain", len(active))
        return self.complete
