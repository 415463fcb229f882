import random
from collections import Counter

import pytest

from blackjackpro.deck import Card, Deck, EmptyDeckError


def _deal_all(deck):
    cards = []
    while len(deck):
        cards.append(deck.deal())
    return cards


def test_fresh_deck_has_52_cards():
    assert len(Deck()) == 52


def test_deal_reduces_size():
    deck = Deck()
    deck.deal()
    assert len(deck) == 51


def test_unshuffled_top_card_is_king_of_spades():
    assert Deck().deal() == Card("Spades", "K", 10)


def test_all_cards_unique():
    cards = _deal_all(Deck())
    assert len(set(cards)) == len(cards) == 52


def test_card_points():
    cards = _deal_all(Deck())
    for card in cards:
        if card.rank == "A":
            assert card.points == 11
        elif card.rank in ("J", "Q", "K"):
            assert card.points == 10
        else:
            assert card.points == int(card.rank)


def test_each_suit_has_thirteen_cards():
    counts = Counter(card.suit for card in _deal_all(Deck()))
    assert counts == {"Hearts": 13, "Diamonds": 13, "Clubs": 13, "Spades": 13}


def test_shuffle_preserves_cards():
    plain = Counter(_deal_all(Deck()))
    shuffled_deck = Deck(random.Random(7))
    shuffled_deck.shuffle()
    assert Counter(_deal_all(shuffled_deck)) == plain


def test_shuffle_is_reproducible_with_seed():
    a = Deck(random.Random(42))
    b = Deck(random.Random(42))
    a.shuffle()
    b.shuffle()
    assert _deal_all(a) == _deal_all(b)


def test_empty_deck_raises():
    deck = Deck()
    _deal_all(deck)
    with pytest.raises(EmptyDeckError):
        deck.deal()


def test_empty_deck_error_is_runtime_error():
    deck = Deck()
    _deal_all(deck)
    with pytest.raises(RuntimeError):
        deck.deal()