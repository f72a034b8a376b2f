"""Blackjack player strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .card import Card, Spot
from .hand import Hand


class Player(ABC):
    """The interface every blackjack player offers."""

    @abstractmethod
    def bet(self, bankroll: int, minimum: int) -> int:
        """Return a wager between ``minimum`` and ``bankroll`` inclusive."""

    @abstractmethod
    def draw(self, dealer: Card, hand: Hand) -> bool:
        """Return True to take another card given the dealer's up card."""

    @abstractmethod
    def expose(self, card: Card) -> None:
        """Let the player see a card that has been turned face up."""

    @abstractmethod
    def shuffled(self) -> None:
        """Tell the player the deck has been reshuffled."""


class SimplePlayer(Player):
    """Bets the minimum and follows basic strategy."""

    def bet(self, bankroll: int, minimum: int) -> int:
        return minimum

    def draw(self, dealer: Card, hand: Hand) -> bool:
        value = hand.value()
        if not value.soft:
            if value.count <= 11:
                return True
            if value.count == 12:
                return not Spot.FOUR <= dealer.spot <= Spot.SIX
            if value.count <= 16:
                return not Spot.TWO <= dealer.spot <= Spot.SIX
            return False
        if value.count <= 17:
            return True
        if value.count == 18:
            return dealer.spot not in (Spot.TWO, Spot.SEVEN, Spot.EIGHT)
        return False

    def expose(self, card: Card) -> None:
        pass

    def shuffled(self) -> None:
        pass


class CountingPlayer(SimplePlayer):
    """Plays like SimplePlayer but keeps a running count to size its bets."""

    def __init__(self) -> None:
        self.count = 0

    def bet(self, bankroll: int, minimum: int) -> int:
        if self.count >= 2 and bankroll >= 2 * minimum:
            return 2 * minimum
        return minimum

    def expose(self, card: Card) -> None:
        if card.spot >= Spot.TEN:
            self.count -= 1
        elif card.spot <= Spot.SIX:
            self.count += 1

    def shuffled(self) -> None:
        self.count = 0


_SIMPLE = SimplePlayer()
_COUNTING = CountingPlayer()


def get_simple() -> SimplePlayer:
    """Return the shared simple player."""
    return _SIMPLE


def get_counting() -> CountingPlayer:
    """Return the shared counting player."""
    return _COUNTING