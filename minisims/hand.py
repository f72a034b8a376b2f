"""A blackjack hand and its value."""

from __future__ import annotations

from dataclasses import dataclass

from .card import Card, Spot


@dataclass(frozen=True)
class HandValue:
    """The total of a hand and whether an ace is counted as eleven."""

    count: int
    soft: bool


class Hand:
    """A blackjack hand of zero or more cards."""

    def __init__(self) -> None:
        self._count = 0
        self._soft = False

    def discard_all(self) -> None:
        """Drop every card, leaving an empty hand."""
        self._count = 0
        self._soft = False

    def add_card(self, card: Card) -> None:
        """Add ``card`` to the hand."""
        if card.spot <= Spot.TEN:
            self._count += card.spot + 2
        elif card.spot <= Spot.KING:
            self._count += 10
        elif self._soft:
            self._count += 1
        else:
            self._count += 11
            self._soft = True

    def value(self) -> HandValue:
        """Best blackjack total not over 21 where possible, and its softness."""
        if self._soft and self._count > 21:
            return HandValue(self._count - 10, False)
        return HandValue(self._count, self._soft)