"""
Game configuration for the Hold'em engine.

Values come from keyword overrides first, then the environment (a local
.env file is loaded when present), then the defaults below.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Optional, Tuple

from dotenv import load_dotenv

DIFFICULTIES = ('beginner', 'intermediate')


@dataclass
class GameConfig:
    num_players: int = 3
    starting_chips: int = 1000
    small_blind: int = 10
    big_blind: int = 20
    human_seats: Tuple[int, ...] = field(default_factory=lambda: (0,))
    ai_difficulty: str = 'beginner'
    seed: Optional[int] = None
    auto_restart: bool = False

    def validate(self) -> 'GameConfig':
        if self.num_players < 2:
            raise ValueError("num_players must be at least 2")
        if self.starting_chips <= 0:
            raise ValueError("starting_chips must be positive")
        if self.small_blind <= 0 or self.big_blind <= 0:
            raise ValueError("blinds must be positive")
        if self.small_blind > self.big_blind:
            raise ValueError("small_blind cannot exceed big_blind")
        if self.ai_difficulty not in DIFFICULTIES:
            raise ValueError(f"ai_difficulty must be one of {', '.join(DIFFICULTIES)}")
        bad_seats = [s for s in self.human_seats if not 0 <= s < self.num_players]
        if bad_seats:
            raise ValueError(f"human seats out of range: {bad_seats}")
        return self


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_seats(value: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in value.split(',') if part.strip())


_ENV_VARS = {
    'num_players': ('POKER_PLAYERS', int),
    'starting_chips': ('POKER_STARTING_CHIPS', int),
    'small_blind': ('POKER_SMALL_BLIND', int),
    'big_blind': ('POKER_BIG_BLIND', int),
    'human_seats': ('POKER_HUMAN_SEATS', _env_seats),
    'ai_difficulty': ('POKER_AI_DIFFICULTY', lambda v: v.strip().lower()),
    'seed': ('POKER_SEED', int),
    'auto_restart': ('POKER_AUTO_RESTART', _env_bool),
}


def load_config(**overrides: Any) -> GameConfig:
    """Build a validated GameConfig from overrides, environment and defaults."""
    load_dotenv()

    values = {}
    for f in fields(GameConfig):
        if overrides.get(f.name) is not None:
            values[f.name] = overrides[f.name]
            continue
        env_name, convert = _ENV_VARS[f.name]
        raw = os.getenv(env_name)
        if raw:
            try:
                values[f.name] = convert(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {env_name}: {raw!r}") from None

    return GameConfig(**values).validate()
