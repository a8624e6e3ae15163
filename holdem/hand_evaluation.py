"""
Hand evaluation functions for the Hold'em engine.

Every evaluation is a HandEvaluation whose natural ordering is the poker
ordering: category, then primary rank, then secondary rank, then kickers.
"""

import itertools
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

from holdem.deck import Card


class HandCategory(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}

WHEEL = [14, 5, 4, 3, 2]


@dataclass(frozen=True, order=True)
class HandEvaluation:
    category: HandCategory
    primary: int
    secondary: int = 0
    kickers: Tuple[int, ...] = ()

    @property
    def name(self) -> str:
        return category_name(self.category)


def category_name(category: HandCategory) -> str:
    return CATEGORY_NAMES[HandCategory(category)]


def is_wheel(evaluation: HandEvaluation) -> bool:
    """A-2-3-4-5 straight. The ace keeps primary 14; the low cards sit in the kickers."""
    return (evaluation.category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH)
            and [evaluation.primary, *evaluation.kickers] == WHEEL)


def _is_straight(ranks: List[int]) -> bool:
    """ranks must be five values sorted descending."""
    if ranks == WHEEL:
        return True
    return all(ranks[i] - 1 == ranks[i + 1] for i in range(4))


def evaluate_5cards(cards: Sequence[Card]) -> HandEvaluation:
    """Classify exactly five cards."""
    assert len(cards) == 5, "five-card classifier called with %d cards" % len(cards)

    ranks = sorted((r for r, _ in cards), reverse=True)
    is_flush = len({s for _, s in cards}) == 1
    is_straight = _is_straight(ranks)

    if is_flush and is_straight:
        if ranks[0] == 14 and ranks != WHEEL:
            return HandEvaluation(HandCategory.ROYAL_FLUSH, 14)
        return HandEvaluation(HandCategory.STRAIGHT_FLUSH, ranks[0], 0, tuple(ranks[1:]))

    # (count, rank) groups, biggest group first then highest rank
    groups = sorted(((cnt, r) for r, cnt in Counter(ranks).items()), reverse=True)
    shape = [cnt for cnt, _ in groups]
    group_ranks = [r for _, r in groups]

    if shape == [4, 1]:
        return HandEvaluation(HandCategory.FOUR_OF_A_KIND, group_ranks[0], 0, (group_ranks[1],))

    if shape == [3, 2]:
        return HandEvaluation(HandCategory.FULL_HOUSE, group_ranks[0], group_ranks[1])

    if is_flush:
        return HandEvaluation(HandCategory.FLUSH, ranks[0], 0, tuple(ranks[1:]))

    if is_straight:
        return HandEvaluation(HandCategory.STRAIGHT, ranks[0], 0, tuple(ranks[1:]))

    if shape == [3, 1, 1]:
        return HandEvaluation(HandCategory.THREE_OF_A_KIND, group_ranks[0], 0, tuple(group_ranks[1:]))

    if shape == [2, 2, 1]:
        high_pair, low_pair, kicker = group_ranks
        return HandEvaluation(HandCategory.TWO_PAIR, high_pair, low_pair, (kicker,))

    if shape == [2, 1, 1, 1]:
        return HandEvaluation(HandCategory.ONE_PAIR, group_ranks[0], 0, tuple(group_ranks[1:]))

    return HandEvaluation(HandCategory.HIGH_CARD, ranks[0], 0, tuple(ranks[1:]))


def best_hand(cards: Iterable[Card]) -> HandEvaluation:
    """Best evaluation over every 5-card combination of 5 to 7 cards."""
    cards = list(cards)
    if len(cards) < 5:
        raise ValueError(f"Need at least 5 cards to evaluate a hand, got {len(cards)}")
    return max(evaluate_5cards(combo) for combo in itertools.combinations(cards, 5))


def evaluate(hole: Sequence[Card], community: Sequence[Card]) -> HandEvaluation:
    """Evaluate a player's two hole cards together with the board."""
    return best_hand(list(hole) + list(community))


def hand_description(evaluation: HandEvaluation) -> str:
    """Convert hand evaluation result to human-readable description."""

    def rank_name(r: int) -> str:
        names = {11: 'Jack', 12: 'Queen', 13: 'King', 14: 'Ace'}
        return names.get(r, str(r))

    def rank_name_plural(r: int) -> str:
        names = {11: 'Jacks', 12: 'Queens', 13: 'Kings', 14: 'Aces'}
        return names.get(r, f"{r}s")

    category = evaluation.category
    primary = evaluation.primary

    if category == HandCategory.ROYAL_FLUSH:
        return "Royal Flush"
    elif category == HandCategory.STRAIGHT_FLUSH:
        if is_wheel(evaluation):
            return "Straight Flush, 5 high (Steel Wheel)"
        return f"Straight Flush, {rank_name(primary)} high"
    elif category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {rank_name_plural(primary)}"
    elif category == HandCategory.FULL_HOUSE:
        return f"Full House, {rank_name_plural(primary)} over {rank_name_plural(evaluation.secondary)}"
    elif category == HandCategory.FLUSH:
        return f"Flush, {rank_name(primary)} high"
    elif category == HandCategory.STRAIGHT:
        if is_wheel(evaluation):
            return "Straight, 5 high (Wheel)"
        return f"Straight, {rank_name(primary)} high"
    elif category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {rank_name_plural(primary)}"
    elif category == HandCategory.TWO_PAIR:
        return f"Two Pair, {rank_name_plural(primary)} and {rank_name_plural(evaluation.secondary)}"
    elif category == HandCategory.ONE_PAIR:
        return f"Pair of {rank_name_plural(primary)}"
    else:
        return f"High Card, {rank_name(primary)}"
