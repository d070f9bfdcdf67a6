"""Scoring and comparing five-card poker hands."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

RANK_ORDER = "23456789TJQKA"
SUITS = "HCDS"


class ParseCardError(ValueError):
    """Raised when text does not describe a card."""

    WRONG_NUMBER_OF_CHARS = "wrong number of characters"
    BAD_RANK = "bad rank"
    BAD_SUIT = "bad suit"

    def __init__(self, kind: str, text: str) -> None:
        super().__init__(f"{kind}: {text!r}")
        self.kind = kind
        self.text = text


@dataclass(frozen=True)
class Card:
    """A playing card given by its rank and suit characters, e.g. ``Card("T", "D")``."""

    rank: str
    suit: str

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse a two-character card such as ``"TD"``; surrounding whitespace is ignored."""
        stripped = text.strip()
        if len(stripped) != 2:
            raise ParseCardError(ParseCardError.WRONG_NUMBER_OF_CHARS, text)
        rank, suit = stripped
        if rank not in RANK_ORDER:
            raise ParseCardError(ParseCardError.BAD_RANK, text)
        if suit not in SUITS:
            raise ParseCardError(ParseCardError.BAD_SUIT, text)
        return cls(rank, suit)

    def rank_value(self) -> int:
        """Numeric rank from 2 up to 14 for an ace; 0 for an unknown rank."""
        position = RANK_ORDER.find(self.rank)
        return position + 2 if position >= 0 else 0


def _compare_cards(a: Card, b: Card) -> int | None:
    """Compare by rank; cards of equal rank but different suit are incomparable."""
    if a.rank == b.rank:
        return 0 if a.suit == b.suit else None
    pos_a = RANK_ORDER.find(a.rank)
    pos_b = RANK_ORDER.find(b.rank)
    return (pos_a > pos_b) - (pos_a < pos_b)


class HandCategory(enum.IntEnum):
    """Kinds of poker hand, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


@dataclass(frozen=True)
class HandScore:
    """The category of a hand together with the cards that make it up.

    Scores order by category, then card by card on rank. Two scores whose
    cards share ranks but differ in suit are neither smaller nor greater.
    """

    category: HandCategory
    cards: tuple[Card, ...]

    def _compare(self, other: HandScore) -> int | None:
        if self.category != other.category:
            return 1 if self.category > other.category else -1
        for mine, theirs in zip(self.cards, other.cards):
            result = _compare_cards(mine, theirs)
            if result != 0:
                return result
        return (len(self.cards) > len(other.cards)) - (len(self.cards) < len(other.cards))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandScore):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HandScore):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HandScore):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HandScore):
            return NotImplemented
        result = self._compare(other)
        return result is not None and result >= 0


def sort_hand(cards: Iterable[Card]) -> tuple[Card, ...]:
    """Sort cards highest rank first; cards of equal rank are ordered by suit letter."""
    return tuple(sorted(cards, key=lambda card: (-card.rank_value(), card.suit)))


def score_hand(hand: Iterable[Card]) -> HandScore:
    """Score a five-card hand that is already sorted highest rank first."""
    cards = tuple(hand)
    if len(cards) != 5:
        raise ValueError(f"a hand has five cards, got {len(cards)}")
    best = HandScore(HandCategory.HIGH_CARD, cards[:1])

    def consider(score: HandScore) -> None:
        nonlocal best
        if best <= score:
            best = score

    def unscorable() -> ValueError:
        return ValueError(f"couldn't score hand {cards!r}")

    ranks = [card.rank_value() for card in cards]
    top = ranks[0]
    if all(rank == top - offset for offset, rank in enumerate(ranks[1:], start=1)):
        consider(HandScore(HandCategory.STRAIGHT, cards))
    if all(card.suit == cards[0].suit for card in cards):
        if best.category is HandCategory.STRAIGHT:
            category = (
                HandCategory.ROYAL_FLUSH if cards[0].rank == "A" else HandCategory.STRAIGHT_FLUSH
            )
            return HandScore(category, best.cards)
        consider(HandScore(HandCategory.FLUSH, cards))

    distinct = len(set(ranks))
    if distinct == 2:
        if all(rank == ranks[0] for rank in ranks[1:4]):
            consider(HandScore(HandCategory.FOUR_KIND, cards[0:4]))
        elif all(rank == ranks[4] for rank in ranks[1:4]):
            consider(HandScore(HandCategory.FOUR_KIND, cards[1:5]))
        elif ranks[0] == ranks[1] == ranks[2] and ranks[3] == ranks[4]:
            consider(HandScore(HandCategory.FULL_HOUSE, cards))
        elif ranks[0] == ranks[1] and ranks[2] == ranks[3] == ranks[4]:
            consider(HandScore(HandCategory.FULL_HOUSE, cards))
        else:
            raise unscorable()
    elif distinct == 3:
        if ranks[0] == ranks[1]:
            if ranks[1] == ranks[2]:
                consider(HandScore(HandCategory.THREE_KIND, cards[0:3]))
            elif ranks[2] == ranks[3]:
                consider(HandScore(HandCategory.TWO_PAIR, cards[0:4]))
            elif ranks[3] == ranks[4]:
                consider(HandScore(HandCategory.TWO_PAIR, cards[0:2] + cards[3:5]))
            else:
                raise unscorable()
        elif ranks[1] == ranks[2]:
            if ranks[2] == ranks[3]:
                consider(HandScore(HandCategory.THREE_KIND, cards[1:4]))
            elif ranks[3] == ranks[4]:
                consider(HandScore(HandCategory.TWO_PAIR, cards[1:5]))
            else:
                raise unscorable()
        elif ranks[2] == ranks[3] == ranks[4]:
            consider(HandScore(HandCategory.THREE_KIND, cards[2:5]))
        else:
            raise unscorable()
    elif distinct == 4:
        pair_start = next(
            (i for i, (a, b) in enumerate(zip(ranks, ranks[1:])) if a == b), None
        )
        if pair_start is None:
            raise unscorable()
        consider(HandScore(HandCategory.ONE_PAIR, cards[pair_start : pair_start + 2]))
    elif distinct != 5:
        raise ValueError(f"impossible rank count {distinct} for hand {cards!r}")
    return best


def player_one_wins(line: str) -> bool:
    """Decide whether the first five cards of a space-separated line beat the next five.

    Hands that score alike are settled by comparing their rank characters in order.
    """
    cards = [Card.parse(token) for token in line.split(" ")]
    if len(cards) < 10:
        raise ValueError(f"expected ten cards, got {len(cards)}")
    first = sort_hand(cards[:5])
    second = sort_hand(cards[5:10])
    first_score = score_hand(first)
    second_score = score_hand(second)
    if first_score > second_score:
        return True
    if first_score < second_score:
        return False
    return [card.rank for card in first] > [card.rank for card in second]


def count_player_one_wins(lines: Iterable[str]) -> int:
    """Number of lines on which player one wins."""
    return sum(1 for line in lines if player_one_wins(line))


def solve_54(path: str | PathLike[str] = "./p054_poker.txt") -> int:
    """Hands won by player one in the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return count_player_one_wins(handle.read().splitlines())