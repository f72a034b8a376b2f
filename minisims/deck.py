"""A standard 52-card deck with a deterministic riffle shuffle."""

from __future__ import annotations

from .card import Card, Spot, Suit

DECK_SIZE = 52


class DeckEmpty(Exception):
    """Raised when a card is requested from an exhausted deck."""


def _new_order() -> list[Card]:
    return [Card(spot, suit) for suit in Suit for spot in Spot]


class Deck:
    """A deck of 52 cards, no jokers.

    The final card of the deck is held back: asking for it raises DeckEmpty.
    """

    def __init__(self) -> None:
        self._cards = _new_order()
        self._next = 0

    def reset(self) -> None:
        """Return the deck to newly-opened order: spades 2-A, hearts, clubs, diamonds."""
        self._cards = _new_order()
        self._next = 0

    def shuffle(self, n: int) -> None:
        """Cut after the first ``n`` cards and interleave, right side first.

        Cards already dealt are gathered back first, in the order they were dealt.
        """
        if not 0 <= n <= DECK_SIZE:
            raise ValueError(f"cut position must be between 0 and {DECK_SIZE}, got {n}")
        left, right = self._cards[:n], self._cards[n:]
        shuffled: list[Card] = []
        for from_right, from_left in zip(right, left):
            shuffled.extend((from_right, from_left))
        paired = min(len(left), len(right))
        shuffled.extend(right[paired:])
        shuffled.extend(left[paired:])
        self._cards = shuffled
        self._next = 0

    def deal(self) -> Card:
        """Return the next card, raising DeckEmpty once only the last card remains."""
        if self._next >= DECK_SIZE - 1:
            raise DeckEmpty("no cards left to deal")
        card = self._cards[self._next]
        self._next += 1
        return card

    def cards_left(self) -> int:
        """Number of cards not dealt since the last reset or shuffle."""
        return DECK_SIZE - self._next