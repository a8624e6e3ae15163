"""
Showdown and winner determination for the Hold'em engine.
"""

import logging
from typing import Any, Dict, List, Sequence

from holdem.deck import Card
from holdem.hand_evaluation import evaluate, hand_description
from holdem.player import Player


class ShowdownEngine:
    """Ranks the live hands and pays the pot out."""

    def __init__(self, players: List[Player]):
        self.players = players

    def evaluate_hands(self, community: Sequence[Card], pot: int, dealer_button: int = 0) -> Dict[str, Any]:
        """Evaluate non-folded players and distribute ``pot`` to the winner(s).

        Exact ties split the pot; odd chips go to the tied seats closest to
        the left of the dealer button. Returns winners (seats), the pot,
        evaluations, descriptions and payouts.
        """
        contenders = [p for p in self.players if not p.folded]
        result: Dict[str, Any] = {
            'winners': [],
            'pot': pot,
            'hands': {},
            'descriptions': {},
            'payouts': {},
        }

        if not contenders:
            logging.warning("No active players for showdown; pot of $%d is not awarded", pot)
            return result

        if len(contenders) == 1:
            winner = contenders[0]
            winner.chips += pot
            result['winners'] = [winner.seat]
            result['payouts'] = {winner.seat: pot}
            logging.info(f"{winner.name} wins ${pot} uncontested")
            return result

        best_val = None
        winners: List[Player] = []
        for p in contenders:
            val = evaluate(p.hole_cards, community)
            result['hands'][p.seat] = val
            result['descriptions'][p.seat] = hand_description(val)
            logging.info(f"{p.name}: {hand_description(val)}")
            if best_val is None or val > best_val:
                best_val = val
                winners = [p]
            elif val == best_val:
                winners.append(p)

        total = len(self.players)
        winners.sort(key=lambda p: (p.seat - dealer_button - 1) % total)
        share, rem = divmod(pot, len(winners))
        for i, winner in enumerate(winners):
            amount = share + (1 if i < rem else 0)
            winner.chips += amount
            result['payouts'][winner.seat] = amount

        result['winners'] = [w.seat for w in winners]
        logging.info("Showdown winners %s with %s split $%d",
                     [w.name for w in winners], hand_description(best_val), pot)
        return result
