import pytest

from minisims.card import Card, Spot, Suit
from minisims.deck import Deck, DeckEmpty


def _deal_all(deck, count):
    return [deck.deal() for _ in range(count)]


def test_new_deck_order():
    deck = Deck()
    cards = _deal_all(deck, 13)
    assert cards[0] == Card(Spot.TWO, Suit.SPADES)
    assert cards == [Card(spot, Suit.SPADES) for spot in Spot]
    assert str(deck.deal()) == "Two of Hearts"


def test_cards_left_counts_down():
    deck = Deck()
    assert deck.cards_left() == 52
    deck.deal()
    deck.deal()
    assert deck.cards_left() == 50


def test_shuffle_26_documented_order():
    deck = Deck()
    deck.shuffle(26)
    cards = _deal_all(deck, 51)
    assert cards[0] == Card(Spot.TWO, Suit.CLUBS)
    assert cards[1] == Card(Spot.TWO, Suit.SPADES)
    assert cards[2] == Card(Spot.THREE, Suit.CLUBS)
    assert cards[3] == Card(Spot.THREE, Suit.SPADES)
    assert cards[50] == Card(Spot.ACE, Suit.DIAMONDS)


def test_dealt_card_returns_before_shuffle():
    deck = Deck()
    before = deck.deal()
    deck.shuffle(26)
    deck.deal()
    after = deck.deal()
    assert before == after


@pytest.mark.parametrize("cut", [0, 52])
def test_trivial_cuts_keep_order(cut):
    deck = Deck()
    deck.shuffle(cut)
    assert _deal_all(deck, 51) == _deal_all(Deck(), 51)


@pytest.mark.parametrize("cut", [1, 13, 25, 26, 27, 39, 51])
def test_shuffle_is_permutation(cut):
    deck = Deck()
    deck.shuffle(cut)
    cards = _deal_all(deck, 51)
    assert len(set(cards)) == 51
    assert deck.cards_left() == 1


def test_shuffle_small_cut_interleaves_then_right_remainder():
    reference = _deal_all(Deck(), 51)
    deck = Deck()
    deck.shuffle(3)
    cards = _deal_all(deck, 51)
    assert cards[:6] == [reference[3], reference[0], reference[4], reference[1], reference[5], reference[2]]
    assert cards[6:] == reference[6:]


def test_shuffle_resets_next_card():
    deck = Deck()
    _deal_all(deck, 10)
    deck.shuffle(20)
    assert deck.cards_left() == 52


def test_reset_restores_order():
    deck = Deck()
    deck.shuffle(30)
    deck.deal()
    deck.reset()
    assert deck.cards_left() == 52
    assert deck.deal() == Card(Spot.TWO, Suit.SPADES)


def test_deal_raises_when_exhausted():
    deck = Deck()
    _deal_all(deck, 51)
    with pytest.raises(DeckEmpty):
        deck.deal()


@pytest.mark.parametrize("cut", [-1, 53])
def test_shuffle_rejects_bad_cut(cut):
    with pytest.raises(ValueError):
        Deck().shuffle(cut)