"""
Rule-based poker AI with difficulty tiers and personality traits.

``decide`` is deterministic: the base policy depends only on its inputs.
Randomness is confined to the final personality adjustment and only
happens when a ``random.Random`` is passed in.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence

from holdem.betting_engine import Action, ActionType, BettingRound
from holdem.deck import Card
from holdem.hand_evaluation import HandCategory, evaluate
from holdem.player import Player, TurnView


class Difficulty(str, Enum):
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'


class HandStrength(IntEnum):
    WEAK = 0        # high card, low pairs
    MEDIUM = 1      # decent pairs, two pair
    STRONG = 2      # trips, straights, flushes
    VERY_STRONG = 3  # full house or better


@dataclass(frozen=True)
class Personality:
    difficulty: Difficulty = Difficulty.BEGINNER
    aggression: float = 0.3       # 0.0 passive .. 1.0 very aggressive
    tightness: float = 0.5        # 0.0 loose .. 1.0 very tight
    bluff_frequency: float = 0.1  # chance to bluff a weak hand when nobody has bet
    position_awareness: float = 0.2  # carried by the presets; decisions use fixed position factors

    @classmethod
    def beginner(cls) -> 'Personality':
        return cls(Difficulty.BEGINNER, aggression=0.2, tightness=0.7,
                   bluff_frequency=0.05, position_awareness=0.1)

    @classmethod
    def intermediate(cls) -> 'Personality':
        return cls(Difficulty.INTERMEDIATE, aggression=0.4, tightness=0.5,
                   bluff_frequency=0.15, position_awareness=0.6)

    @classmethod
    def for_difficulty(cls, difficulty) -> 'Personality':
        if Difficulty(difficulty) == Difficulty.INTERMEDIATE:
            return cls.intermediate()
        return cls.beginner()


BASE_EQUITY = {
    HandStrength.WEAK: 0.15,
    HandStrength.MEDIUM: 0.35,
    HandStrength.STRONG: 0.65,
    HandStrength.VERY_STRONG: 0.85,
}

# chance the personality step looks at deviating from the base action
DEVIATION_CHANCE = 0.1


def preflop_strength(hole_cards: Sequence[Card]) -> HandStrength:
    """Bucket two hole cards using pairs and high-card thresholds only."""
    if len(hole_cards) != 2:
        return HandStrength.WEAK

    r1, r2 = hole_cards[0][0], hole_cards[1][0]
    if r1 == r2:
        if r1 >= 10:
            return HandStrength.STRONG
        if r1 >= 7:
            return HandStrength.MEDIUM
        return HandStrength.WEAK

    high, low = max(r1, r2), min(r1, r2)
    if high >= 12 and low >= 10:
        return HandStrength.MEDIUM
    return HandStrength.WEAK


def hand_strength(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> HandStrength:
    if len(community_cards) < 3:
        return preflop_strength(hole_cards)

    evaluation = evaluate(hole_cards, community_cards)
    category = evaluation.category
    if category >= HandCategory.FULL_HOUSE:
        return HandStrength.VERY_STRONG
    if category >= HandCategory.THREE_OF_A_KIND:
        return HandStrength.STRONG
    if category == HandCategory.TWO_PAIR:
        return HandStrength.MEDIUM
    if category == HandCategory.ONE_PAIR and evaluation.primary >= 10:
        return HandStrength.MEDIUM
    return HandStrength.WEAK


def pot_odds(betting_round: BettingRound, player: Player, pot: Optional[int] = None) -> float:
    """Share of the final pot a call would be. ``pot`` is the whole hand pot when known."""
    if pot is None:
        pot = betting_round.pot
    call_amount = betting_round.call_amount(player)
    if call_amount == 0:
        return 0.0
    return call_amount / (pot + call_amount)


def estimate_equity(strength: HandStrength, players_in_hand: int) -> float:
    if players_in_hand <= 2:
        opponent_factor = 1.0
    elif players_in_hand == 3:
        opponent_factor = 0.9
    elif players_in_hand == 4:
        opponent_factor = 0.8
    else:
        opponent_factor = 0.7
    return BASE_EQUITY[strength] * opponent_factor


def beginner_decision(player: Player, betting_round: BettingRound, strength: HandStrength) -> Action:
    call_amount = betting_round.call_amount(player)

    if call_amount > player.chips:
        return Action.fold()
    if call_amount == 0:
        return Action.check()

    if strength == HandStrength.VERY_STRONG:
        raise_amount = min(betting_round.min_raise, player.chips // 4)
        return Action.raise_by(raise_amount) if raise_amount > 0 else Action.call()
    if strength == HandStrength.STRONG:
        return Action.call() if call_amount <= player.chips // 6 else Action.fold()
    if strength == HandStrength.MEDIUM:
        return Action.call() if call_amount <= player.chips // 10 else Action.fold()
    # weak: only stay in when it is very cheap
    return Action.call() if call_amount <= betting_round.min_raise // 2 else Action.fold()


def intermediate_decision(player: Player, betting_round: BettingRound, strength: HandStrength,
                          odds: float, personality: Personality, players_in_hand: int,
                          position: int, pot: Optional[int] = None) -> Action:
    call_amount = betting_round.call_amount(player)
    if pot is None:
        pot = betting_round.pot

    if call_amount > player.chips:
        return Action.fold()

    if call_amount == 0:
        if strength >= HandStrength.STRONG:
            # bet for value
            bet_amount = min(betting_round.min_raise * 2, player.chips // 4)
            if bet_amount > 0:
                return Action.raise_by(bet_amount)
        return Action.check()

    late_position = position > players_in_hand // 2
    position_factor = 1.2 if late_position else 0.9
    player_factor = 1.1 if players_in_hand <= 3 else 0.95
    equity = estimate_equity(strength, players_in_hand) * position_factor * player_factor

    if strength == HandStrength.VERY_STRONG:
        raise_amount = min(pot // 2, player.chips // 3)
        if raise_amount >= betting_round.min_raise and raise_amount > 0:
            return Action.raise_by(raise_amount)
        return Action.call()

    if strength == HandStrength.STRONG:
        if equity <= odds * 0.8:
            return Action.fold()
        if personality.aggression > 0.4 and late_position:
            raise_amount = betting_round.min_raise
            if 0 < raise_amount <= player.chips // 4:
                return Action.raise_by(raise_amount)
        return Action.call()

    if strength == HandStrength.MEDIUM:
        return Action.call() if equity > odds * 1.2 else Action.fold()

    if equity > odds * 1.5 and call_amount <= betting_round.min_raise:
        return Action.call()
    return Action.fold()


def apply_personality_adjustments(action: Action, personality: Personality, strength: HandStrength,
                                  betting_round: BettingRound, rng: Optional[random.Random]) -> Action:
    if rng is None or betting_round.min_raise <= 0:
        return action

    if rng.random() < DEVIATION_CHANCE:
        if action.type == ActionType.CALL:
            if personality.aggression > 0.5 and rng.random() < personality.aggression:
                return Action.raise_by(betting_round.min_raise)
        elif action.type == ActionType.FOLD:
            if personality.tightness < 0.3 and rng.random() < 1.0 - personality.tightness:
                return Action.call()

    if strength == HandStrength.WEAK and rng.random() < personality.bluff_frequency:
        if betting_round.current_bet == 0:
            return Action.raise_by(betting_round.min_raise)

    return action


def decide(player: Player, betting_round: BettingRound, community_cards: Sequence[Card],
           personality: Personality, active_player_count: int, position: int,
           rng: Optional[random.Random] = None, pot: Optional[int] = None) -> Action:
    """Choose one action for ``player``. Never mutates the player or the round."""
    strength = hand_strength(player.hole_cards, community_cards)

    if personality.difficulty == Difficulty.INTERMEDIATE:
        odds = pot_odds(betting_round, player, pot)
        base = intermediate_decision(player, betting_round, strength, odds, personality,
                                     active_player_count, position, pot)
    else:
        base = beginner_decision(player, betting_round, strength)

    action = apply_personality_adjustments(base, personality, strength, betting_round, rng)
    logging.debug("AI %s (%s, %s): base=%s final=%s", player.name, personality.difficulty.value,
                  strength.name, base, action)
    return action


class AIActor:
    """Adapts ``decide`` to the Player.actor interface."""

    def __init__(self, personality: Personality, rng: Optional[random.Random] = None):
        self.personality = personality
        self.rng = rng

    def __call__(self, view: TurnView) -> Action:
        return decide(view.player, view.betting_round, view.community_cards, self.personality,
                      view.active_player_count, view.position, self.rng, view.pot)