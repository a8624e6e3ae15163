"""
Terminal renderer for the Hold'em engine.

Presentation is kept out of the engine: a front end takes
``Game.snapshot(viewer)`` and calls ``TerminalUI.render`` to get a
colorized string for the table.
"""

from typing import Any, Dict, List, Optional

from holdem.teaching import analyze_starting_hand, describe_options, phase_explanation
from holdem.ui.cards import cards_horizontal
from holdem.ui.colors import Colors


class TerminalUI:
    def __init__(self, viewer: Optional[int] = None, show_tips: bool = True, clear_screen: bool = True):
        self.viewer = viewer
        self.show_tips = show_tips
        self.clear_screen = clear_screen

    def _player_line(self, p: Dict[str, Any], snapshot: Dict[str, Any]) -> str:
        if p['folded']:
            status_icon = f"{Colors.RED}✗{Colors.RESET}"
        elif p['all_in']:
            status_icon = f"{Colors.YELLOW}★{Colors.RESET}"
        else:
            status_icon = f"{Colors.GREEN}●{Colors.RESET}"

        tags = []
        if p['id'] == snapshot['dealer_button']:
            tags.append("D")
        if p['id'] == snapshot['small_blind_seat']:
            tags.append("SB")
        if p['id'] == snapshot['big_blind_seat']:
            tags.append("BB")
        tag_text = f" [{'/'.join(tags)}]" if tags else ""

        bet_info = f" (bet: ${p['current_bet']})" if p['current_bet'] > 0 else ""
        marker = " ◀" if p['id'] == snapshot['current_seat'] else ""
        kind = "AI" if p['kind'] == 'ai' else "HU"
        return f"  {status_icon} {kind} {p['name']}{tag_text}: ${p['chips']}{bet_info}{marker}"

    def render(self, snapshot: Dict[str, Any], legal_actions: Optional[List[Dict[str, Any]]] = None) -> str:
        """Render a game snapshot as a colorized multi-line string."""
        out = []
        if self.clear_screen:
            out.append(Colors.CLEAR_SCREEN)
        out.append(f"{Colors.BOLD}{Colors.YELLOW}TEXAS HOLD'EM - hand #{snapshot['hand_number']}{Colors.RESET}")
        phase = snapshot['phase']
        out.append(f"{Colors.DIM}Phase: {phase.replace('_', ' ').title()}{Colors.RESET}")
        out.append("")

        out.append(f"{Colors.BOLD}{Colors.GREEN}POT: ${snapshot['pot']}{Colors.RESET}")
        if snapshot['current_bet'] > 0:
            out.append(f"{Colors.DIM}Current bet: ${snapshot['current_bet']}{Colors.RESET}")
        out.append("")

        if snapshot['community_cards']:
            out.append(f"{Colors.BOLD}{Colors.CYAN}Community Cards:{Colors.RESET}")
            out.append(cards_horizontal(snapshot['community_cards']))
            out.append("")

        out.append(f"{Colors.BOLD}{Colors.CYAN}Players:{Colors.RESET}")
        for p in snapshot['players']:
            out.append(self._player_line(p, snapshot))
            if p['hole_cards'] is not None and p['id'] != self.viewer and p['hole_cards']:
                out.append(cards_horizontal(p['hole_cards']))
        out.append("")

        me = next((p for p in snapshot['players'] if p['id'] == self.viewer), None)
        if me is not None and me['hole_cards']:
            out.append(f"{Colors.BOLD}{Colors.YELLOW}Your Cards:{Colors.RESET}")
            out.append(cards_horizontal(me['hole_cards']))
            if self.show_tips and phase == 'preflop':
                out.append(f"{Colors.MAGENTA}{analyze_starting_hand(me['hole_cards'])}{Colors.RESET}")
            out.append("")

        result = snapshot.get('last_result')
        if result and result['winners']:
            names = {p['id']: p['name'] for p in snapshot['players']}
            for seat in result['winners']:
                description = result['descriptions'].get(seat, "uncontested")
                out.append(f"{Colors.BOLD}{Colors.GREEN}{names[seat]} wins ${result['payouts'][seat]}"
                           f" ({description}){Colors.RESET}")
            out.append("")

        if snapshot['action_history']:
            out.append(f"{Colors.BOLD}{Colors.CYAN}Recent Actions:{Colors.RESET}")
            for line in snapshot['action_history'][-5:]:
                out.append(f"{Colors.DIM}  {line}{Colors.RESET}")
            out.append("")

        if self.show_tips:
            tip = phase_explanation(phase)
            if tip:
                out.append(f"{Colors.GREY}{tip}{Colors.RESET}")

        if snapshot['game_winner'] is not None:
            names = {p['id']: p['name'] for p in snapshot['players']}
            out.append(f"{Colors.BOLD}{Colors.YELLOW}GAME OVER! {names[snapshot['game_winner']]} wins the game!{Colors.RESET}")
        elif snapshot['current_seat'] is not None and snapshot['current_seat'] == self.viewer:
            out.append(f"{Colors.BOLD}{Colors.GREEN}YOUR TURN{Colors.RESET}")
            if legal_actions:
                out.append(describe_options(legal_actions))
        elif snapshot['current_seat'] is not None:
            names = {p['id']: p['name'] for p in snapshot['players']}
            out.append(f"{Colors.DIM}Waiting for {names[snapshot['current_seat']]}...{Colors.RESET}")

        return "\n".join(out)
