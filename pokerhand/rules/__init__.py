"""Poker rules implementations.

This module provides:
- Card and suit definitions (ranks.py)
- Hand evaluation and comparison (hands.py)
- Vectorised strength encoding (batch.py)
"""

from .ranks import (
    Suit,
    Card,
    MIN_RANK,
    MAX_RANK,
    RANK_SYMBOLS,
    SUIT_BY_LETTER,
    rank_to_str,
    is_valid_rank,
    make_cards_from_string,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    HandRanking,
    Hand,
    HandNotEvaluatedError,
    evaluate,
    compare_hands,
    can_beat,
    best_hands,
    get_hand_categories,
)

from .batch import (
    ENCODING_WIDTH,
    encode_hand,
    encode_hands,
    strength_order,
    winner_indices,
)

__all__ = [
    # Ranks
    "Suit",
    "Card",
    "MIN_RANK",
    "MAX_RANK",
    "RANK_SYMBOLS",
    "SUIT_BY_LETTER",
    "rank_to_str",
    "is_valid_rank",
    "make_cards_from_string",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "HandRanking",
    "Hand",
    "HandNotEvaluatedError",
    "evaluate",
    "compare_hands",
    "can_beat",
    "best_hands",
    "get_hand_categories",
    # Batch
    "ENCODING_WIDTH",
    "encode_hand",
    "encode_hands",
    "strength_order",
    "winner_indices",
]
