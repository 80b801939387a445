"""Card rank and suit definitions.

Ranks are plain integers from 2 to 14 (11=Jack, 12=Queen, 13=King, 14=Ace).

This module provides:
- Suit definitions and letter lookup
- Card representation and parsing
- Rank display helpers
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

MIN_RANK = 2
MAX_RANK = 14

# Rank symbols for display (all other ranks render as their numeral)
RANK_SYMBOLS = {
    11: "J",
    12: "Q",
    13: "K",
    14: "A",
}

# Face letters accepted when parsing (T is accepted but never displayed)
SYMBOL_TO_RANK = {"T": 10, "J": 11, "Q": 12, "K": 13, "A": 14}

CARD_PATTERN = re.compile(r"(\d{1,2}|[TJQKA])([SHCD])", re.IGNORECASE | re.ASCII)


class Suit(Enum):
    """Card suits, keyed by their single-letter code."""

    SPADES = "s"
    HEARTS = "h"
    CLUBS = "c"
    DIAMONDS = "d"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Proper name of the suit, e.g. "Clubs"."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, value: Union["Suit", str]) -> Optional["Suit"]:
        """Look up a suit by letter.

        Args:
            value: A letter (s/h/c/d, any case) or a Suit

        Returns:
            The matching Suit, or None if the letter is not a suit

        Raises:
            TypeError: If value is neither a string nor a Suit
        """
        if isinstance(value, Suit):
            return value
        if not isinstance(value, str):
            raise TypeError(f"cannot parse suit {value!r}")
        return SUIT_BY_LETTER.get(value.lower())


# Letter to suit mapping (for parsing)
SUIT_BY_LETTER: Dict[str, Suit] = {suit.letter: suit for suit in Suit}


def rank_to_str(rank: int) -> str:
    """Render a rank as J/Q/K/A for faces and its numeral otherwise."""
    return RANK_SYMBOLS.get(rank, str(rank))


def is_valid_rank(rank: int) -> bool:
    return isinstance(rank, int) and not isinstance(rank, bool) and MIN_RANK <= rank <= MAX_RANK


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank only, so a 5 of clubs is neither less nor
    greater than a 5 of diamonds. Equality and hashing use rank and suit,
    making cards usable as set members and dict keys.
    """

    rank: int
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, int) or isinstance(self.rank, bool):
            raise TypeError(f"unsupported argument type ({type(self.rank).__name__})")
        if not is_valid_rank(self.rank):
            raise ValueError(f"rank {self.rank!r} out of range")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"invalid suit ({self.suit!r})")

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Card({self})"

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def to_display_string(self) -> str:
        """Render the card like 'Qd' or '10h'."""
        return f"{rank_to_str(self.rank)}{self.suit.letter}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'As', '10d' or 'Td'.

        Args:
            s: Card string in format "RANK+SUIT", case-insensitive

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed or the rank is out of range
            TypeError: If s is not a string
        """
        if not isinstance(s, str):
            raise TypeError(f"unsupported argument type ({type(s).__name__})")

        match = CARD_PATTERN.fullmatch(s)
        if match is None:
            raise ValueError(f"invalid card string: {s!r}")

        rank_str, suit_char = match.groups()
        if rank_str.isdigit():
            rank = int(rank_str)
        else:
            rank = SYMBOL_TO_RANK[rank_str.upper()]

        return cls(rank=rank, suit=SUIT_BY_LETTER[suit_char.lower()])

    @classmethod
    def from_rank(cls, rank: int, suit: Union[Suit, str, None]) -> "Card":
        """Create a card from a numeric rank and a suit letter or Suit.

        Raises:
            TypeError: If rank is not an integer
            ValueError: If rank is outside 2-14 or the suit is not recognized
        """
        if not isinstance(rank, int) or isinstance(rank, bool):
            raise TypeError(f"unsupported argument type ({type(rank).__name__})")
        if not is_valid_rank(rank):
            raise ValueError(f"rank {rank!r} out of range")

        parsed = Suit.parse(suit) if isinstance(suit, (Suit, str)) else None
        if parsed is None:
            raise ValueError(f"invalid suit ({suit!r})")

        return cls(rank=rank, suit=parsed)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "As Kd 10h".

    Args:
        s: Whitespace-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]
