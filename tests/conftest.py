import random
from collections import deque
from typing import Callable, Dict, Iterable, List, Optional, Union

import pytest

from holdem.betting_engine import Action
from holdem.config import GameConfig
from holdem.deck import Card, parse_card
from holdem.game import Game
from holdem.player import Player, PlayerKind

ScriptedAction = Union[Action, Dict[str, int], Callable]


class SequentialActor:
    """Callable helper which returns predetermined poker actions."""

    def __init__(self, actions: Iterable[ScriptedAction]):
        self._queue = deque(actions)
        self.views = []

    def __call__(self, view):
        self.views.append(view)
        if not self._queue:
            raise RuntimeError("No more scripted actions available")
        action = self._queue.popleft()
        if callable(action):
            return action(view)
        return action


def cards(*specs: str) -> List[Card]:
    """cards('Ah', 'Kd', '10s') -> list of Card."""
    return [parse_card(spec) for spec in specs]


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for creating Player objects with deterministic actors."""

    def _factory(seat: int, chips: int = 1000, actions: Optional[Iterable[ScriptedAction]] = None, *,
                 kind: PlayerKind = PlayerKind.AI, hole: Optional[List[str]] = None) -> Player:
        player = Player(seat, kind=kind, chips=chips)
        if actions is not None:
            player.actor = SequentialActor(actions)
        if hole:
            player.hole_cards = cards(*hole)
        return player

    return _factory


@pytest.fixture
def make_game(make_player) -> Callable[..., Game]:
    """Seeded game factory. ``scripts`` maps seat -> scripted actions; seats without
    a script are played by the built-in AI without randomness."""

    def _factory(num_players: int = 3, chips: int = 1000, scripts: Optional[Dict[int, Iterable]] = None,
                 human_seats: Iterable[int] = (), seed: int = 7, **config) -> Game:
        scripts = scripts or {}
        human_seats = tuple(human_seats)
        players = []
        for seat in range(num_players):
            kind = PlayerKind.HUMAN if seat in human_seats else PlayerKind.AI
            players.append(make_player(seat, chips, scripts.get(seat), kind=kind))
        cfg = GameConfig(num_players=num_players, starting_chips=chips,
                         human_seats=human_seats, seed=seed, **config).validate()
        game = Game(players, cfg, random.Random(seed))
        for p in players:
            if p.is_ai and p.seat not in scripts:
                p.actor.rng = None
        return game

    return _factory
