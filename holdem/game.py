"""
Texas Hold'em hand lifecycle for the Hold'em engine.

This is the main coordination module: it brings together the table state
(GameEngine), the street betting (BettingRound), the button and blinds
(GamePosition) and the showdown (ShowdownEngine).

Nothing here blocks. ``tick()`` performs one step of work and returns
whether anything changed; a front end calls it at its own pace. When a
human seat is due to act, ticks are no-ops until ``submit_action`` has
left an action for that seat.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from holdem.ai import AIActor, Personality
from holdem.betting_engine import Action, BettingRound
from holdem.config import GameConfig
from holdem.deck import Card, DeckExhaustedError, card_str
from holdem.game_engine import GameEngine
from holdem.player import HumanActor, Player, PlayerKind, TurnView
from holdem.positions import GamePosition
from holdem.showdown_engine import ShowdownEngine


class GamePhase(str, Enum):
    SETUP = 'setup'
    DEALING = 'dealing'
    PREFLOP = 'preflop'
    FLOP = 'flop'
    TURN = 'turn'
    RIVER = 'river'
    SHOWDOWN = 'showdown'
    GAME_OVER = 'game_over'


BETTING_PHASES = (GamePhase.PREFLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER)


class Game:
    """Phase controller: owns every piece of engine state and mutates it only inside ``tick``."""

    def __init__(self, players: List[Player], config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        if sorted(p.seat for p in players) != list(range(len(players))):
            raise ValueError("Players must occupy seats 0..n-1 exactly once")

        self.players = sorted(players, key=lambda p: p.seat)
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        self.engine = GameEngine(self.players, self.rng)
        self.position = GamePosition(len(self.players), self.config.small_blind, self.config.big_blind)
        self.showdown = ShowdownEngine(self.players)

        self.phase = GamePhase.SETUP
        self.betting_round: Optional[BettingRound] = None
        self.hand_number = 0
        self.last_result: Optional[Dict[str, Any]] = None
        self.game_winner: Optional[int] = None
        self.finished = False
        self.paused = False

        for p in self.players:
            if p.actor is not None:
                continue
            if p.is_ai:
                if p.personality is None:
                    p.personality = Personality.for_difficulty(self.config.ai_difficulty)
                p.actor = AIActor(p.personality, self.rng)
            else:
                p.actor = HumanActor()

        self._handlers: Dict[GamePhase, Callable[[], bool]] = {
            GamePhase.SETUP: self._start_hand,
            GamePhase.DEALING: self._deal,
            GamePhase.PREFLOP: self._betting_step,
            GamePhase.FLOP: self._betting_step,
            GamePhase.TURN: self._betting_step,
            GamePhase.RIVER: self._betting_step,
            GamePhase.SHOWDOWN: self._showdown,
            GamePhase.GAME_OVER: self._game_over,
        }

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> 'Game':
        """Seat humans and AIs as the configuration describes."""
        config = (config or GameConfig()).validate()
        players = []
        for seat in range(config.num_players):
            if seat in config.human_seats:
                players.append(Player(seat, PlayerKind.HUMAN, config.starting_chips))
            else:
                players.append(Player(seat, PlayerKind.AI, config.starting_chips,
                                      personality=Personality.for_difficulty(config.ai_difficulty)))
        return cls(players, config, rng)

    # -- read-only views -------------------------------------------------

    @property
    def pot(self) -> int:
        street_pot = self.betting_round.pot if self.betting_round else 0
        return self.engine.pot + street_pot

    @property
    def community_cards(self) -> List[Card]:
        return self.engine.community

    @property
    def action_history(self) -> List[str]:
        return self.engine.action_history

    def player(self, seat: int) -> Player:
        return self.players[seat]

    def active_players(self) -> List[Player]:
        return [p for p in self.players if not p.folded]

    @property
    def current_seat(self) -> Optional[int]:
        """Seat due to act, or None outside a betting street."""
        if self.phase not in BETTING_PHASES or self.betting_round is None:
            return None
        if self.betting_round.complete:
            return None
        for seat in self.betting_round.players_to_act:
            if self.players[seat].can_act:
                return seat
        return None

    def is_waiting_for_human(self) -> bool:
        seat = self.current_seat
        if seat is None:
            return False
        actor = self.players[seat].actor
        return isinstance(actor, HumanActor) and actor.pending is None

    def legal_actions(self, seat: int) -> List[Dict[str, int]]:
        """Structurally valid actions for ``seat`` right now (empty when it is not their turn)."""
        if seat != self.current_seat:
            return []
        player, rnd = self.players[seat], self.betting_round
        call = rnd.call_amount(player)
        options = [{'action': 'fold', 'amount': 0}]
        if call == 0:
            options.append({'action': 'check', 'amount': 0})
        else:
            options.append({'action': 'call', 'amount': min(call, player.chips)})
        max_raise = player.chips - call
        if max_raise > 0:
            options.append({'action': 'raise', 'amount': 0,
                            'min_amount': max(1, min(rnd.min_raise, max_raise)),
                            'max_amount': max_raise})
        return options

    def snapshot(self, viewer: Optional[int] = None, reveal_all: bool = False) -> Dict[str, Any]:
        """Read-only state for rendering. Hole cards are only shown to their owner,
        and to everybody for hands that went to a contested showdown."""
        rnd = self.betting_round
        shown = set()
        if self.phase == GamePhase.GAME_OVER and self.last_result:
            shown = set(self.last_result.get('hands', {}))

        players = []
        for p in self.players:
            visible = reveal_all or p.seat == viewer or p.seat in shown
            players.append({
                'id': p.seat,
                'name': p.name,
                'kind': p.kind.value,
                'chips': p.chips,
                'current_bet': p.current_bet,
                'folded': p.folded,
                'all_in': p.is_all_in,
                'card_count': len(p.hole_cards),
                'hole_cards': list(p.hole_cards) if visible else None,
            })

        return {
            'phase': self.phase.value,
            'hand_number': self.hand_number,
            'pot': self.pot,
            'current_bet': rnd.current_bet if rnd else 0,
            'min_raise': rnd.min_raise if rnd else self.position.big_blind_amount,
            'community_cards': list(self.engine.community),
            'dealer_button': self.position.dealer_button,
            'small_blind_seat': self.position.small_blind_seat(),
            'big_blind_seat': self.position.big_blind_seat(),
            'current_seat': self.current_seat,
            'players': players,
            'action_history': list(self.engine.action_history),
            'last_result': self.last_result,
            'game_winner': self.game_winner,
            'finished': self.finished,
        }

    # -- input -----------------------------------------------------------

    def submit_action(self, seat_id: int, action: Union[Action, Dict[str, Any]]) -> bool:
        """Queue a human decision. Returns False (and changes nothing) when rejected."""
        try:
            action = Action.parse(action)
        except ValueError as e:
            logging.warning("Rejected action from seat %s: %s", seat_id, e)
            return False

        if seat_id != self.current_seat:
            logging.warning("Rejected %s from seat %s: seat %s is due to act",
                            action, seat_id, self.current_seat)
            return False

        actor = self.players[seat_id].actor
        if not isinstance(actor, HumanActor):
            logging.warning("Rejected %s from seat %s: seat is not human-controlled", action, seat_id)
            return False

        actor.submit(action)
        return True

    # -- driving ---------------------------------------------------------

    def pause(self) -> None:
        self.paused = True
        logging.info("Game auto-advance PAUSED")

    def resume(self) -> None:
        self.paused = False
        logging.info("Game auto-advance ENABLED")

    def tick(self) -> bool:
        """Advance the game by one step when ready. Returns True if state changed."""
        if self.paused or self.finished:
            return False
        try:
            return self._handlers[self.phase]()
        except DeckExhaustedError:
            logging.error("Deck exhausted during %s of hand #%d; aborting hand",
                          self.phase.value, self.hand_number)
            raise

    advance = tick

    def run(self, max_ticks: int = 10000, stop_on_human: bool = True,
            until: Optional[Callable[['Game'], bool]] = None) -> int:
        """Tick until nothing happens, a human must act, ``until`` holds or the budget runs out.

        Returns the number of ticks that changed state.
        """
        progressed = 0
        for _ in range(max_ticks):
            if until is not None and until(self):
                break
            if stop_on_human and self.is_waiting_for_human():
                break
            if not self.tick():
                break
            progressed += 1
        return progressed

    def _set_phase(self, phase: GamePhase) -> None:
        logging.debug("Phase %s -> %s (pot $%d)", self.phase.value, phase.value, self.pot)
        self.phase = phase

    # -- phase handlers --------------------------------------------------

    def _start_hand(self) -> bool:
        self.hand_number += 1
        self.engine.reset_round()
        self.last_result = None
        for p in self.players:
            if isinstance(p.actor, HumanActor):
                p.actor.clear()

        seat_ids = [p.seat for p in self.players]
        self.betting_round = BettingRound(seat_ids, forced_bet=self.position.big_blind_amount)
        logging.info(f"Starting hand #{self.hand_number} (dealer seat {self.position.dealer_button})")
        self._set_phase(GamePhase.DEALING)
        return True

    def _post_blinds(self) -> None:
        rnd = self.betting_round
        for label, seat, amount in (
            ("small blind", self.position.small_blind_seat(), self.position.small_blind_amount),
            ("big blind", self.position.big_blind_seat(), self.position.big_blind_amount),
        ):
            player = self.players[seat]
            if player.folded:
                continue
            paid = rnd.post_blind(player, amount)
            line = f"{player.name} posts {label} ${paid}"
            self.engine.action_history.append(line)
            logging.info(f"{line} (remaining: {player.chips})")
        logging.info(f"Total pot after blinds: {self.pot} chips")

    def _deal(self) -> bool:
        self._post_blinds()
        self.engine.deal_hole_cards()
        order = [s for s in self.position.betting_order(preflop=True) if not self.players[s].folded]
        self.betting_round.set_acting_order(order)
        self._set_phase(GamePhase.PREFLOP)
        return True

    def _betting_step(self) -> bool:
        rnd = self.betting_round
        players = self.engine.players_by_seat

        rnd.skip_idle(players)
        if not rnd.players_to_act and not rnd.check_complete(self.players):
            # somebody still owes chips but nobody is queued
            rnd.requeue_unmatched(players)
            rnd.skip_idle(players)

        if rnd.check_complete(self.players):
            return self._finish_street()

        seat = rnd.peek_next()
        player = players[seat]
        view = TurnView(player=player, betting_round=rnd,
                        community_cards=list(self.engine.community),
                        active_player_count=len(self.active_players()),
                        position=rnd.position_of(seat),
                        pot=self.pot)
        decision = player.take_action(view)
        if decision is None:
            return False

        action = Action.parse(decision)
        rnd.advance()
        line = rnd.apply_action(player, action, players)
        self.engine.action_history.append(line)
        logging.info(line)
        rnd.check_complete(self.players)
        return True

    def _finish_street(self) -> bool:
        self.engine.collect_bets(self.betting_round.pot)
        self.betting_round = None

        if len(self.active_players()) <= 1:
            logging.info("Only one player remaining, skipping to showdown")
            self._set_phase(GamePhase.SHOWDOWN)
            return True

        if self.phase == GamePhase.PREFLOP:
            self.engine.deal_flop()
            next_phase = GamePhase.FLOP
        elif self.phase == GamePhase.FLOP:
            self.engine.deal_turn()
            next_phase = GamePhase.TURN
        elif self.phase == GamePhase.TURN:
            self.engine.deal_river()
            next_phase = GamePhase.RIVER
        else:
            self._set_phase(GamePhase.SHOWDOWN)
            return True

        order = [s for s in self.position.betting_order(preflop=False) if not self.players[s].folded]
        self.betting_round = BettingRound(order, forced_bet=0, min_raise=self.position.big_blind_amount)
        self._set_phase(next_phase)
        return True

    def _showdown(self) -> bool:
        pot = self.engine.pot
        result = self.showdown.evaluate_hands(self.engine.community, pot, self.position.dealer_button)
        if result['winners']:
            self.engine.pot = 0
        for seat, amount in result['payouts'].items():
            description = result['descriptions'].get(seat)
            line = f"{self.players[seat].name} wins ${amount}"
            if description:
                line += f" with {description}"
            self.engine.action_history.append(line)

        board = ' '.join(card_str(c) for c in self.engine.community) or '-'
        logging.info(f"Hand #{self.hand_number} finished, board: {board}")
        self.last_result = result
        self.position.advance_dealer_button()
        self._set_phase(GamePhase.GAME_OVER)
        return True

    def _game_over(self) -> bool:
        with_chips = [p for p in self.players if p.chips > 0]
        if len(with_chips) > 1:
            logging.info(f"Round complete, {len(with_chips)} players remaining")
            self._set_phase(GamePhase.SETUP)
            return True

        winner = with_chips[0] if with_chips else None
        self.game_winner = winner.seat if winner else None
        if winner:
            logging.info(f"GAME OVER! {winner.name} wins the entire game with ${winner.chips} chips!")
        else:
            logging.info("GAME OVER! All players are eliminated.")

        if self.config.auto_restart:
            for p in self.players:
                p.chips = self.config.starting_chips
                p.reset_for_new_hand()
            logging.info(f"Starting new game! All players reset to ${self.config.starting_chips} chips.")
            self._set_phase(GamePhase.SETUP)
            return True

        self.finished = True
        return True
