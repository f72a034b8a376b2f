"""Playing cards: suits, spots and the card itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """The four suits, in the order a newly opened deck holds them."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    @property
    def label(self) -> str:
        """The suit's display name, e.g. ``"Spades"``."""
        return self.name.capitalize()


class Spot(IntEnum):
    """The thirteen card ranks, from lowest to highest."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def label(self) -> str:
        """The spot's display name, e.g. ``"Queen"``."""
        return self.name.capitalize()


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    spot: Spot
    suit: Suit

    def __str__(self) -> str:
        return f"{self.spot.label} of {self.suit.label}"