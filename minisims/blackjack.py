"""A blackjack table: one player against the dealer over a number of hands."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Protocol

from .card import Card
from .deck import Deck
from .hand import Hand
from .mersenne import CutGenerator
from .player import Player, get_counting, get_simple

MINIMUM_BET = 5
SHUFFLE_PASSES = 7
RESHUFFLE_BELOW = 20


class _Cutter(Protocol):
    def next_cut(self) -> int: ...


def _shuffle(deck: Deck, player: Player, cutter: _Cutter, out: list[str]) -> None:
    out.append("Shuffling the deck")
    for _ in range(SHUFFLE_PASSES):
        cut = cutter.next_cut()
        out.append(f"cut at {cut}")
        deck.shuffle(cut)
        player.shuffled()


def play(
    player: Player,
    bankroll: int = 100,
    hands: int = 60,
    cutter: _Cutter | None = None,
) -> list[str]:
    """Play up to ``hands`` hands and return the transcript, one line per entry."""
    if cutter is None:
        cutter = CutGenerator()
    out: list[str] = []
    deck = Deck()
    _shuffle(deck, player, cutter, out)

    played = 0
    while bankroll >= MINIMUM_BET and played < hands:
        played += 1
        out.append(f"Hand {played} bankroll {bankroll}")
        if deck.cards_left() < RESHUFFLE_BELOW:
            _shuffle(deck, player, cutter, out)

        wager = player.bet(bankroll, MINIMUM_BET)
        out.append(f"Player bets {wager}")

        player_hand = Hand()
        dealer_hand = Hand()
        player_first = deck.deal()
        up_card = deck.deal()
        player_second = deck.deal()
        hole_card = deck.deal()

        for card in (player_first, up_card, player_second):
            player.expose(card)
        player_hand.add_card(player_first)
        dealer_hand.add_card(up_card)
        player_hand.add_card(player_second)
        dealer_hand.add_card(hole_card)
        out.append(f"Player dealt {player_first}")
        out.append(f"Dealer dealt {up_card}")
        out.append(f"Player dealt {player_second}")

        if player_hand.value().count == 21:
            bankroll += 3 * wager // 2
            out.append("Player dealt natural 21")
            continue

        while player.draw(up_card, player_hand):
            card = _deal_face_up(deck, player, player_hand)
            out.append(f"Player dealt {card}")
        player_total = player_hand.value().count
        out.append(f"Player's total is {player_total}")
        if player_total > 21:
            out.append("Player busts")
            bankroll -= wager
            continue

        player.expose(hole_card)
        out.append(f"Dealer's hole card is {hole_card}")
        while dealer_hand.value().count < 17:
            card = _deal_face_up(deck, player, dealer_hand)
            out.append(f"Dealer dealt {card}")
        dealer_total = dealer_hand.value().count
        out.append(f"Dealer's total is {dealer_total}")
        if dealer_total > 21:
            out.append("Dealer busts")
            bankroll += wager
            continue

        if player_total > dealer_total:
            bankroll += wager
            out.append("Player wins")
        elif player_total < dealer_total:
            bankroll -= wager
            out.append("Dealer wins")
        else:
            out.append("Push")

    out.append(f"Player has {bankroll} after {played} hands")
    return out


def _deal_face_up(deck: Deck, player: Player, hand: Hand) -> Card:
    card = deck.deal()
    hand.add_card(card)
    player.expose(card)
    return card


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game from the command line and print its transcript."""
    parser = argparse.ArgumentParser(description="Simulate a blackjack player.")
    parser.add_argument("bankroll", type=int, nargs="?", default=100)
    parser.add_argument("hands", type=int, nargs="?", default=60)
    parser.add_argument(
        "player", nargs="?", choices=("simple", "counting"), default="counting"
    )
    args = parser.parse_args(argv)
    player = get_simple() if args.player == "simple" else get_counting()
    for line in play(player, args.bankroll, args.hands):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())