import random

import pytest

from holdem.ai import (
    AIActor,
    Difficulty,
    HandStrength,
    Personality,
    apply_personality_adjustments,
    beginner_decision,
    decide,
    estimate_equity,
    hand_strength,
    pot_odds,
    preflop_strength,
)
from holdem.betting_engine import Action, ActionType, BettingRound
from holdem.deck import parse_card
from holdem.player import TurnView


def cards(*specs):
    return [parse_card(spec) for spec in specs]


@pytest.mark.parametrize("hole, expected", [
    (("Ah", "Ad"), HandStrength.STRONG),
    (("8h", "8d"), HandStrength.MEDIUM),
    (("3h", "3d"), HandStrength.WEAK),
    (("Kh", "Qd"), HandStrength.MEDIUM),
    (("7h", "2d"), HandStrength.WEAK),
])
def test_preflop_strength(hole, expected):
    assert preflop_strength(cards(*hole)) == expected


def test_postflop_strength_uses_made_hand():
    assert hand_strength(cards("Ah", "Ad"), cards("As", "Kd", "Kc")) == HandStrength.VERY_STRONG
    assert hand_strength(cards("Ah", "Kd"), cards("Qs", "Jd", "10c")) == HandStrength.STRONG
    assert hand_strength(cards("Jh", "Jd"), cards("2s", "5d", "9c")) == HandStrength.MEDIUM
    assert hand_strength(cards("4h", "4d"), cards("2s", "Kd", "9c")) == HandStrength.WEAK


def test_beginner_checks_when_free(make_player):
    player = make_player(0, hole=["7h", "2d"])
    rnd = BettingRound([0, 1])
    assert beginner_decision(player, rnd, HandStrength.WEAK) == Action.check()


def test_beginner_folds_weak_hand_to_a_bet(make_player):
    player = make_player(0, hole=["7h", "2d"])
    rnd = BettingRound([0, 1], forced_bet=20)
    assert beginner_decision(player, rnd, HandStrength.WEAK) == Action.fold()


def test_beginner_folds_when_call_exceeds_stack(make_player):
    player = make_player(0, chips=10, hole=["Ah", "Ad"])
    rnd = BettingRound([0, 1], forced_bet=20)
    assert beginner_decision(player, rnd, HandStrength.VERY_STRONG) == Action.fold()


def test_beginner_raises_monsters(make_player):
    player = make_player(0, hole=["Ah", "Ad"])
    rnd = BettingRound([0, 1], forced_bet=20)
    action = decide(player, rnd, cards("As", "Kd", "Kc"), Personality.beginner(), 3, 0)
    assert action == Action.raise_by(20)


def test_decide_is_deterministic_without_rng(make_player):
    player = make_player(0, hole=["Kh", "Qd"])
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    for personality in (Personality.beginner(), Personality.intermediate()):
        first = decide(player, rnd, [], personality, 3, 1)
        assert all(decide(player, rnd, [], personality, 3, 1) == first for _ in range(20))
    assert player.chips == 1000
    assert rnd.pot == 0


def test_intermediate_value_bets_when_checked_to(make_player):
    player = make_player(0, hole=["Ah", "Ad"])
    rnd = BettingRound([0, 1], min_raise=20)
    action = decide(player, rnd, [], Personality.intermediate(), 2, 0)
    assert action == Action.raise_by(40)


def test_intermediate_uses_pot_odds(make_player):
    player = make_player(0, hole=["Kh", "Qd"])
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    assert decide(player, rnd, [], Personality.intermediate(), 3, 0).type == ActionType.FOLD

    rnd.pot = 100
    assert decide(player, rnd, [], Personality.intermediate(), 3, 0).type == ActionType.CALL


def test_equity_shrinks_with_more_opponents():
    assert estimate_equity(HandStrength.STRONG, 2) > estimate_equity(HandStrength.STRONG, 6)


def test_personality_presets():
    assert Personality.for_difficulty("intermediate").difficulty == Difficulty.INTERMEDIATE
    assert Personality.for_difficulty(Difficulty.BEGINNER) == Personality.beginner()
    with pytest.raises(ValueError):
        Personality.for_difficulty("expert")


def test_personality_adjustments_need_rng():
    rnd = BettingRound([0, 1])
    action = Action.check()
    assert apply_personality_adjustments(action, Personality(bluff_frequency=1.0), HandStrength.WEAK,
                                         rnd, None) == action
    bluff = apply_personality_adjustments(action, Personality(bluff_frequency=1.0), HandStrength.WEAK,
                                          BettingRound([0, 1], min_raise=20), random.Random(0))
    assert bluff == Action.raise_by(20)


def test_ai_actor_uses_turn_view(make_player):
    player = make_player(0, hole=["7h", "2d"])
    rnd = BettingRound([0, 1], forced_bet=20)
    actor = AIActor(Personality.beginner())
    view = TurnView(player=player, betting_round=rnd, community_cards=[], active_player_count=2, position=0)
    assert actor(view) == Action.fold()


class ScriptedRandom(random.Random):
    """random.Random that hands out predetermined values from random()."""

    def __init__(self, *values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_aggressive_personality_turns_call_into_raise(make_player):
    player = make_player(0, hole=["Kh", "Qd"])
    rnd = BettingRound([0, 1], forced_bet=20)
    maniac = Personality(Difficulty.BEGINNER, aggression=1.0, tightness=0.5, bluff_frequency=0.0)

    assert decide(player, rnd, [], maniac, 2, 0) == Action.call()
    assert decide(player, rnd, [], maniac, 2, 0, ScriptedRandom(0.05, 0.5)) == Action.raise_by(20)


def test_loose_personality_turns_fold_into_call(make_player):
    player = make_player(0, hole=["7h", "2d"])
    rnd = BettingRound([0, 1], forced_bet=20)
    loose = Personality(Difficulty.BEGINNER, aggression=0.2, tightness=0.0, bluff_frequency=0.0)

    assert decide(player, rnd, [], loose, 2, 0) == Action.fold()
    assert decide(player, rnd, [], loose, 2, 0, ScriptedRandom(0.05, 0.5)) == Action.call()
    # no deviation roll, no bluff: the base action stands
    assert decide(player, rnd, [], loose, 2, 0, ScriptedRandom(0.9, 0.9)) == Action.fold()


@pytest.mark.parametrize("seed", range(25))
def test_seeded_decide_repeats(make_player, seed):
    player = make_player(0, hole=["Kh", "Qd"])
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    wild = Personality(Difficulty.INTERMEDIATE, aggression=1.0, tightness=0.0, bluff_frequency=0.5)

    first = decide(player, rnd, [], wild, 3, 1, random.Random(seed), pot=60)
    second = decide(player, rnd, [], wild, 3, 1, random.Random(seed), pot=60)

    assert first == second


def test_position_awareness_does_not_change_decisions(make_player):
    player = make_player(0, hole=["Kh", "Qd"])
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    for position in range(3):
        for pot in (20, 100, 400):
            actions = {decide(player, rnd, [], Personality(Difficulty.INTERMEDIATE, position_awareness=aware),
                              3, position, pot=pot)
                       for aware in (0.0, 0.5, 1.0)}
            assert len(actions) == 1


def test_pot_odds_prefers_whole_hand_pot(make_player):
    player = make_player(0)
    rnd = BettingRound([0, 1], forced_bet=20)
    rnd.pot = 20
    assert pot_odds(rnd, player) == pytest.approx(0.5)
    assert pot_odds(rnd, player, pot=80) == pytest.approx(0.2)


def test_very_strong_raise_sized_from_whole_pot(make_player):
    player = make_player(0, hole=["Ah", "Ad"])
    rnd = BettingRound([0, 1], forced_bet=20)
    rnd.pot = 20
    board = cards("As", "Kd", "Kc")

    assert decide(player, rnd, board, Personality.intermediate(), 2, 0) == Action.call()
    assert decide(player, rnd, board, Personality.intermediate(), 2, 0, pot=200) == Action.raise_by(100)
