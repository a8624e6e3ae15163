"""
Terminal presentation helpers for the Hold'em engine.
"""

from .colors import Colors
from .cards import card_art, cards_horizontal, SUIT_SYMBOLS, SUIT_COLORS

__all__ = ['Colors', 'card_art', 'cards_horizontal', 'SUIT_SYMBOLS', 'SUIT_COLORS']
