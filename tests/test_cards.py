from fractions import Fraction

import pytest

from cards import (
    DECK_SIZE,
    DECK_TOTAL_VALUE,
    Card,
    Rank,
    Suit,
    card_to_id,
    full_deck,
    id_to_card,
    parse_card,
)


def test_full_deck_has_every_card_once():
    deck = full_deck()
    assert len(deck) == DECK_SIZE == 40
    assert len(set(deck)) == 40
    assert set(deck) == {Card(s, r) for s in Suit for r in Rank}


def test_canonical_order():
    deck = full_deck()
    assert deck == sorted(deck, key=lambda c: c.canonical_key)
    assert deck[0] == Card(Suit.DENARI, Rank.ACE)
    assert deck[-1] == Card(Suit.BASTONI, Rank.KING)


def test_value_equality():
    a = Card(Suit.COPPE, Rank.TWO)
    b = Card(Suit.COPPE, Rank.TWO)
    assert a == b and hash(a) == hash(b)
    assert a is not b


def test_card_is_immutable():
    c = Card(Suit.COPPE, Rank.TWO)
    with pytest.raises(AttributeError):
        c.rank = Rank.ACE


def test_strength_order():
    order = sorted(Rank, key=lambda r: r.strength, reverse=True)
    assert order == [
        Rank.THREE, Rank.TWO, Rank.ACE, Rank.KING, Rank.KNIGHT,
        Rank.JACK, Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.FOUR,
    ]


def test_points():
    assert Rank.ACE.points == 1
    for r in (Rank.TWO, Rank.THREE, Rank.JACK, Rank.KNIGHT, Rank.KING):
        assert r.points == Fraction(1, 3)
    for r in (Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN):
        assert r.points == 0


def test_deck_total_value():
    assert DECK_TOTAL_VALUE == Fraction(32, 3)


def test_id_bijection():
    ids = [card_to_id(c) for c in full_deck()]
    assert ids == list(range(40))
    assert all(id_to_card(i) == c for i, c in enumerate(full_deck()))
    with pytest.raises(ValueError):
        id_to_card(40)


def test_str_and_parse():
    c = Card(Suit.DENARI, Rank.KNIGHT)
    assert str(c) == "CD"
    assert parse_card("cd") == c
    for bad in ("", "XD", "AZ", "10D"):
        with pytest.raises(ValueError):
            parse_card(bad)
