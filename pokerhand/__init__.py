"""pokerhand - five-card poker hand evaluation.

Parses cards, classifies five-card hands into the ten standard categories
and orders any two hands.
"""

__version__ = "0.1.0"
__author__ = "Poker Hand Team"

from pokerhand.rules import Card, Hand, HandCategory, Suit, compare_hands

__all__ = ["__version__", "Card", "Hand", "HandCategory", "Suit", "compare_hands"]
