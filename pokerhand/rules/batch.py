"""Vectorised strength encoding for many evaluated hands.

Each hand becomes one int16 row:

    [category, primary, secondary, k0, k1, k2, k3, k4]

Absent ranks and missing kickers are stored as 0. Within one category,
primary and secondary ranks the kicker counts always match, so ordering the
rows lexicographically gives the same order as compare_hands.
"""

from typing import Sequence

import numpy as np

from .hands import HAND_SIZE, Hand

ENCODING_WIDTH = 3 + HAND_SIZE

# Column indices
COL_CATEGORY = 0
COL_PRIMARY = 1
COL_SECONDARY = 2
COL_KICKERS = 3


def _lexsort_rows(encoded: np.ndarray) -> np.ndarray:
    if encoded.shape[0] == 0:
        return np.zeros(0, dtype=np.intp)
    # lexsort treats the last key as primary
    return np.lexsort(encoded.T[::-1])


def encode_hand(hand: Hand) -> np.ndarray:
    """Encode one hand as a strength row.

    Raises:
        HandNotEvaluatedError: If the hand is not five cards
    """
    row = np.zeros(ENCODING_WIDTH, dtype=np.int16)
    row[COL_CATEGORY] = int(hand.category)
    row[COL_PRIMARY] = hand.primary_rank or 0
    row[COL_SECONDARY] = hand.secondary_rank or 0
    kickers = hand.kickers or ()
    row[COL_KICKERS : COL_KICKERS + len(kickers)] = kickers
    return row


def encode_hands(hands: Sequence[Hand]) -> np.ndarray:
    """Encode hands into an (n, 8) int16 array, one row per hand."""
    if len(hands) == 0:
        return np.zeros((0, ENCODING_WIDTH), dtype=np.int16)
    return np.stack([encode_hand(h) for h in hands])


def strength_order(hands: Sequence[Hand], strongest_first: bool = False) -> np.ndarray:
    """Indices that sort hands from weakest to strongest.

    With strongest_first the order runs from strongest to weakest instead.
    Ties keep their input order either way.
    """
    encoded = encode_hands(hands)
    if strongest_first:
        encoded = -encoded
    return _lexsort_rows(encoded)


def winner_indices(hands: Sequence[Hand]) -> np.ndarray:
    """Indices of every hand tied for the strongest ranking."""
    encoded = encode_hands(hands)
    if encoded.shape[0] == 0:
        return np.zeros(0, dtype=np.intp)
    best = encoded[_lexsort_rows(encoded)[-1]]
    return np.flatnonzero(np.all(encoded == best, axis=1))
