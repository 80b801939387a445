"""Five-card hand evaluation, comparison, and display.

Categories (high to low):
- Royal flush: A-K-Q-J-10 of one suit
- Straight flush: five consecutive cards of one suit
- Four of a kind, full house, flush, straight
- Three of a kind, two pairs, pair, high card

Comparison rules:
- Category first
- Then the primary rank (the duplicated rank, or the top of a straight/flush)
- Then the secondary rank (the lower pair of two pairs, the pair of a full house)
- Then the kickers, highest first

Only hands of exactly five cards are evaluated. Hands of any other size
can be built and inspected but not ranked, compared, or described.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from .ranks import Card, Suit, make_cards_from_string, rank_to_str

HAND_SIZE = 5

WHEEL_RANKS = [14, 5, 4, 3, 2]


class HandCategory(IntEnum):
    """Hand categories ordered by strength (higher value = stronger hand)."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ")


# Categories described as "<rank> high"
HIGH_CARD_QUALIFIED = frozenset(
    [
        HandCategory.STRAIGHT,
        HandCategory.FLUSH,
        HandCategory.STRAIGHT_FLUSH,
        HandCategory.ROYAL_FLUSH,
    ]
)


class HandNotEvaluatedError(Exception):
    """Raised when ranking data is requested from a hand that is not five cards."""

    pass


@dataclass(frozen=True)
class HandRanking:
    """The result of evaluating a five-card hand.

    Attributes:
        category: The hand category
        primary_rank: Rank that decides ties first, or None for high card
        secondary_rank: Lower pair of two pairs or pair of a full house, else None
        kickers: Remaining ranks in descending order, or None where they never matter
        suit: Suit shared by all five cards for flushes and straight flushes, else None
    """

    category: HandCategory
    primary_rank: Optional[int] = None
    secondary_rank: Optional[int] = None
    kickers: Optional[Tuple[int, ...]] = None
    suit: Optional[Suit] = field(default=None, compare=False)


def evaluate(cards: Sequence[Card]) -> HandRanking:
    """Classify exactly five cards.

    Args:
        cards: Five Card objects, in any order

    Returns:
        HandRanking for the cards

    Raises:
        HandNotEvaluatedError: If cards does not hold exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise HandNotEvaluatedError(f"cannot evaluate {len(cards)} cards, need {HAND_SIZE}")

    suits = {card.suit for card in cards}
    ranks = sorted((card.rank for card in cards), reverse=True)

    flush = len(suits) == 1
    low = ranks[-1]
    straight = [r - low for r in ranks] == [4, 3, 2, 1, 0] or ranks == WHEEL_RANKS

    if flush or straight:
        flush_suit = next(iter(suits)) if flush else None
        # The ace plays low in the wheel
        top = 5 if ranks == WHEEL_RANKS else ranks[0]
        if flush and straight:
            category = HandCategory.ROYAL_FLUSH if top == 14 else HandCategory.STRAIGHT_FLUSH
            return HandRanking(category=category, primary_rank=top, suit=flush_suit)
        if straight:
            return HandRanking(category=HandCategory.STRAIGHT, primary_rank=top)
        return HandRanking(
            category=HandCategory.FLUSH,
            primary_rank=ranks[0],
            kickers=tuple(ranks[1:]),
            suit=flush_suit,
        )

    counts = Counter(ranks)

    # Two pairs first: a scan for the largest duplicate count would see just a pair
    pairs = sorted((r for r, c in counts.items() if c == 2), reverse=True)
    if len(pairs) == 2:
        kickers = tuple(r for r in ranks if r not in pairs)
        return HandRanking(
            category=HandCategory.TWO_PAIRS,
            primary_rank=pairs[0],
            secondary_rank=pairs[1],
            kickers=kickers,
        )

    by_count = {c: r for r, c in counts.items() if c > 1}
    singles = tuple(r for r in ranks if counts[r] == 1)

    if 4 in by_count:
        return HandRanking(
            category=HandCategory.FOUR_OF_A_KIND, primary_rank=by_count[4], kickers=singles
        )
    if 3 in by_count and 2 in by_count:
        return HandRanking(
            category=HandCategory.FULL_HOUSE,
            primary_rank=by_count[3],
            secondary_rank=by_count[2],
        )
    if 3 in by_count:
        return HandRanking(
            category=HandCategory.THREE_OF_A_KIND, primary_rank=by_count[3], kickers=singles
        )
    if 2 in by_count:
        return HandRanking(category=HandCategory.PAIR, primary_rank=by_count[2], kickers=singles)

    # Five of one rank only happens with a repeated card; it ranks as high card
    return HandRanking(
        category=HandCategory.HIGH_CARD, primary_rank=by_count.get(5), kickers=singles
    )


@dataclass(frozen=True, eq=False)
class Hand:
    """A hand of cards, evaluated on construction when it holds five cards.

    Attributes:
        cards: Tuple of cards in the order they were supplied
        ranking: Evaluation result, or None when the hand is not five cards
    """

    cards: Tuple[Card, ...]
    ranking: Optional[HandRanking] = field(init=False, default=None)

    def __post_init__(self):
        if isinstance(self.cards, (str, bytes)) or not isinstance(self.cards, Iterable):
            raise TypeError(f"unsupported argument type ({type(self.cards).__name__})")
        cards = tuple(self.cards)
        for card in cards:
            if not isinstance(card, Card):
                raise TypeError(f"unsupported argument type ({type(card).__name__})")
        object.__setattr__(self, "cards", cards)
        if len(cards) == HAND_SIZE:
            object.__setattr__(self, "ranking", evaluate(cards))

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Build a hand from whitespace-separated cards like "As Kd 10h 9c 2s"."""
        if not isinstance(s, str):
            raise TypeError(f"unsupported argument type ({type(s).__name__})")
        return cls(tuple(make_cards_from_string(s)))

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        return cls(tuple(cards))

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self.cards)

    @property
    def is_evaluated(self) -> bool:
        return self.ranking is not None

    def _require_ranking(self) -> HandRanking:
        if self.ranking is None:
            raise HandNotEvaluatedError(
                f"hand of {self.size} cards has no ranking, need {HAND_SIZE}"
            )
        return self.ranking

    @property
    def category(self) -> HandCategory:
        return self._require_ranking().category

    @property
    def primary_rank(self) -> Optional[int]:
        return self._require_ranking().primary_rank

    @property
    def secondary_rank(self) -> Optional[int]:
        return self._require_ranking().secondary_rank

    @property
    def kickers(self) -> Optional[Tuple[int, ...]]:
        return self._require_ranking().kickers

    @property
    def suit(self) -> Optional[Suit]:
        """Suit of a flush, straight flush or royal flush, else None."""
        return self._require_ranking().suit

    def describe(self) -> str:
        """Category name with a qualifier, e.g. "full house (8s full of 5s)".

        Raises:
            HandNotEvaluatedError: If the hand is not five cards
        """
        ranking = self._require_ranking()
        category = ranking.category

        if category in HIGH_CARD_QUALIFIED:
            extra = f"{rank_to_str(ranking.primary_rank)} high"
        elif category == HandCategory.HIGH_CARD:
            top = ranking.kickers[0] if ranking.kickers else ranking.primary_rank
            extra = rank_to_str(top)
        else:
            dupes = [
                rank_to_str(r) + "s"
                for r in (ranking.primary_rank, ranking.secondary_rank)
                if r is not None
            ]
            joiner = " full of " if category == HandCategory.FULL_HOUSE else " and "
            extra = joiner.join(dupes)

        return f"{category.display_name} ({extra})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"Hand({cards_str})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        if not (self.is_evaluated and other.is_evaluated):
            return self is other
        return compare_hands(self, other) == 0

    def __hash__(self) -> int:
        if self.ranking is None:
            return id(self)
        return hash(self.ranking)

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) < 0

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) <= 0

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) > 0

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) >= 0


def _compare_optional(a: Optional[int], b: Optional[int]) -> int:
    # An absent rank on either side does not decide anything
    if a is None or b is None:
        return 0
    return (a > b) - (a < b)


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if they tie

    Raises:
        HandNotEvaluatedError: If either hand is not five cards
    """
    r1 = hand1._require_ranking()
    r2 = hand2._require_ranking()

    result = int(r1.category) - int(r2.category)
    if result == 0:
        result = _compare_optional(r1.primary_rank, r2.primary_rank)
    if result == 0:
        result = _compare_optional(r1.secondary_rank, r2.secondary_rank)
    if result == 0:
        for k1, k2 in zip(r1.kickers or (), r2.kickers or ()):
            result = _compare_optional(k1, k2)
            if result != 0:
                break
    return result


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 is strictly stronger than hand2."""
    return compare_hands(hand1, hand2) > 0


def best_hands(hands: Iterable[Hand]) -> List[Hand]:
    """Return every hand tied for the strongest ranking, in input order.

    Raises:
        HandNotEvaluatedError: If any hand is not five cards
    """
    best: List[Hand] = []
    for hand in hands:
        if not best:
            hand._require_ranking()
            best = [hand]
            continue
        result = compare_hands(hand, best[0])
        if result > 0:
            best = [hand]
        elif result == 0:
            best.append(hand)
    return best


def get_hand_categories() -> List[HandCategory]:
    """Get all hand categories, weakest first."""
    return list(HandCategory)
