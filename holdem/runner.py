"""
asyncio driver for a Game.

The engine never waits on anything; this loop supplies the pacing. It
calls ``tick()`` every ``pace`` seconds, renders the table for the human
viewer and reads commands off the event loop (in an executor for plain
blocking input functions) before handing them to ``submit_action``.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from holdem.game import Game, GamePhase
from holdem.terminal_ui import TerminalUI

ReadLine = Callable[[str], Union[str, Awaitable[str]]]

QUIT_COMMANDS = ('q', 'quit', 'exit')

HELP_TEXT = ("Commands: fold (f), check (k), call (c), raise <amount> (r <amount>), "
             "allin, quit")


def parse_command(text: str, game: Game, seat: int) -> Optional[Dict[str, Any]]:
    """Translate a typed command into an action dict, or None when it is not understood."""
    parts = text.strip().lower().split()
    if not parts:
        return None
    cmd, args = parts[0], parts[1:]

    if cmd in ('f', 'fold'):
        return {'action': 'fold'}
    if cmd in ('k', 'check'):
        return {'action': 'check'}
    if cmd in ('c', 'call'):
        return {'action': 'call'}
    if cmd in ('r', 'raise', 'bet'):
        if not args:
            return None
        try:
            amount = int(args[0])
        except ValueError:
            return None
        return {'action': 'raise', 'amount': amount}
    if cmd in ('a', 'allin', 'all-in'):
        for option in game.legal_actions(seat):
            if option['action'] == 'raise':
                return {'action': 'raise', 'amount': option['max_amount']}
        return {'action': 'call'}
    return None


async def _read(read_line: ReadLine, prompt: str) -> str:
    if inspect.iscoroutinefunction(read_line):
        return await read_line(prompt)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, read_line, prompt)


async def run_game(game: Game, pace: float = 0.5, viewer: Optional[int] = None,
                   read_line: ReadLine = input, write: Callable[[str], Any] = print,
                   max_hands: Optional[int] = None, ui: Optional[TerminalUI] = None) -> Game:
    """Drive ``game`` until it is finished, the player quits or ``max_hands`` hands were played."""
    ui = ui or TerminalUI(viewer)
    last_phase = None

    while not game.finished:
        if max_hands is not None and game.phase == GamePhase.SETUP and game.hand_number >= max_hands:
            logging.info("Played %d hands, stopping", game.hand_number)
            break

        if game.is_waiting_for_human():
            seat = game.current_seat
            write(ui.render(game.snapshot(viewer=seat), game.legal_actions(seat)))
            line = (await _read(read_line, "> ")).strip()
            if line.lower() in QUIT_COMMANDS:
                logging.info("Player quit at hand #%d", game.hand_number)
                break
            action = parse_command(line, game, seat)
            if action is None:
                write(HELP_TEXT)
                continue
            if not game.submit_action(seat, action):
                write("That action is not possible right now.")
            continue

        if game.paused:
            await asyncio.sleep(pace or 0.1)
            continue

        if not game.tick():
            # nothing can progress without outside input
            break

        if game.phase != last_phase:
            last_phase = game.phase
            write(ui.render(game.snapshot(viewer=viewer)))
        await asyncio.sleep(pace)

    if game.finished:
        write(ui.render(game.snapshot(viewer=viewer, reveal_all=True)))
    return game
